"""Telegram command and message handlers."""

import logging

from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from aptos_helper.bot import messages
from aptos_helper.config import settings
from aptos_helper.core.address import format_address, is_valid_address
from aptos_helper.core.knowledge import BALANCE_USAGE_RESPONSE, KnowledgeResponder
from aptos_helper.core.rate_limiter import RateLimiter
from aptos_helper.logging_config import chat_id_var, user_id_var
from aptos_helper.services.aptos import AptosService

logger = logging.getLogger(__name__)


def _bind_log_context(update: Update) -> None:
    """Stamp the current user/chat onto log records for this update."""
    user = update.effective_user
    chat = update.effective_chat
    user_id_var.set(str(user.id) if user else "")
    chat_id_var.set(str(chat.id) if chat else "")


def command_argument(text: str | None) -> str:
    """Return the trimmed text following the command token."""
    if not text:
        return ""
    parts = text.split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


class CommandDispatcher:
    """Routes chat events to commands, balance lookups and the knowledge responder.

    Every event passes the rate limiter first. Denied commands are dropped
    silently; denied free-text messages get a short "please wait" notice.
    """

    def __init__(
        self,
        rate_limiter: RateLimiter | None = None,
        aptos_service: AptosService | None = None,
        responder: KnowledgeResponder | None = None,
    ):
        self.rate_limiter = (
            rate_limiter
            if rate_limiter is not None
            else RateLimiter(window_ms=settings.RATE_LIMIT_WINDOW_MS)
        )
        self.aptos_service = aptos_service if aptos_service is not None else AptosService()
        self.responder = (
            responder
            if responder is not None
            else KnowledgeResponder(faucet_url=settings.FAUCET_URL)
        )

    def _allowed(self, update: Update) -> bool:
        _bind_log_context(update)
        allowed = self.rate_limiter.is_allowed(update.effective_user.id)
        if not allowed:
            logger.debug("Rate limited")
        return allowed

    async def start_handler(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /start command."""
        if not self._allowed(update):
            return

        await context.bot.send_message(
            chat_id=update.effective_chat.id, text=messages.WELCOME_MESSAGE
        )

    async def help_handler(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /help command."""
        if not self._allowed(update):
            return

        await context.bot.send_message(chat_id=update.effective_chat.id, text=messages.HELP_MESSAGE)

    async def faucet_handler(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /faucet command."""
        if not self._allowed(update):
            return

        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text=messages.FAUCET_MESSAGE.format(faucet_url=settings.FAUCET_URL),
            parse_mode=ParseMode.MARKDOWN,
        )

    async def learn_handler(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /learn command."""
        if not self._allowed(update):
            return

        await context.bot.send_message(
            chat_id=update.effective_chat.id,
            text=messages.LEARN_MESSAGE,
            parse_mode=ParseMode.MARKDOWN,
        )

    async def balance_handler(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle /balance <address> - look up the APT balance on testnet."""
        if not self._allowed(update):
            return

        chat_id = update.effective_chat.id
        address = command_argument(update.effective_message.text)

        if not address:
            await context.bot.send_message(chat_id=chat_id, text=BALANCE_USAGE_RESPONSE)
            return

        if not is_valid_address(address):
            await context.bot.send_message(chat_id=chat_id, text=messages.INVALID_ADDRESS_MESSAGE)
            return

        formatted_address = format_address(address)

        try:
            await context.bot.send_message(chat_id=chat_id, text=messages.CHECKING_BALANCE_MESSAGE)

            logger.info(f"Balance lookup for {formatted_address}")
            result = await self.aptos_service.get_account_balance(formatted_address, use_testnet=True)

            if result.success:
                text = messages.BALANCE_MESSAGE.format(
                    address=formatted_address,
                    balance=result.balance,
                    network=result.network,
                    explorer_url=settings.explorer_account_url(formatted_address, "testnet"),
                )
                await context.bot.send_message(
                    chat_id=chat_id, text=text, parse_mode=ParseMode.MARKDOWN
                )
            else:
                await context.bot.send_message(
                    chat_id=chat_id, text=messages.BALANCE_ERROR_MESSAGE.format(error=result.error)
                )
        except Exception:
            logger.exception("Balance check error")
            await context.bot.send_message(chat_id=chat_id, text=messages.BALANCE_FAILURE_MESSAGE)

    async def message_handler(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Handle free-text messages via the knowledge responder."""
        chat_id = update.effective_chat.id

        if not self._allowed(update):
            await context.bot.send_message(
                chat_id=chat_id,
                text=messages.RATE_LIMITED_MESSAGE.format(
                    seconds=self.rate_limiter.window_ms / 1000
                ),
            )
            return

        user_message = update.effective_message.text
        if not user_message:
            return

        logger.info(f"Question: {user_message[:50]}...")

        try:
            response = self.responder.generate_response(user_message)
        except Exception:
            logger.exception("Knowledge response error")
            response = messages.RESPONDER_FAILURE_MESSAGE

        await context.bot.send_message(chat_id=chat_id, text=response)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log errors raised while polling or inside handlers."""
    logger.error("Bot error while handling update %s", update, exc_info=context.error)
