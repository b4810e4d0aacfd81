"""Shared fixtures for bot tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from aptos_helper.bot.handlers import CommandDispatcher
from aptos_helper.core.knowledge import KnowledgeResponder
from aptos_helper.core.rate_limiter import RateLimiter
from aptos_helper.services.aptos import BalanceResult


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


def make_update(text: str = "hello", user_id: int = 111222333, chat_id: int = 999) -> MagicMock:
    """Build a minimal Telegram Update stand-in."""
    update = MagicMock()
    update.effective_user.id = user_id
    update.effective_chat.id = chat_id
    update.effective_message.text = text
    return update


def sent_texts(context: MagicMock) -> list[str]:
    """Texts passed to ``context.bot.send_message`` in call order."""
    return [c.kwargs["text"] for c in context.bot.send_message.call_args_list]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rate_limiter(clock):
    return RateLimiter(window_ms=2000, clock=clock)


@pytest.fixture
def aptos_service():
    service = MagicMock()
    service.get_account_balance = AsyncMock(
        return_value=BalanceResult(success=True, balance="1.23456789", network="Testnet")
    )
    service.close = AsyncMock()
    return service


@pytest.fixture
def dispatcher(rate_limiter, aptos_service):
    return CommandDispatcher(
        rate_limiter=rate_limiter,
        aptos_service=aptos_service,
        responder=KnowledgeResponder(),
    )


@pytest.fixture
def context():
    ctx = MagicMock()
    ctx.bot.send_message = AsyncMock()
    return ctx
