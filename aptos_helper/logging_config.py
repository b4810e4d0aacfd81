"""Log setup for the helper bot.

``setup_logging("Bot")`` is called once from ``main``. Handlers bind the
sender with ``user_id_var`` / ``chat_id_var`` so every line logged while an
update is processed carries ``[User ..][Chat ..]``.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from contextvars import ContextVar
from pathlib import Path

user_id_var: ContextVar[str] = ContextVar("user_id_var", default="")
chat_id_var: ContextVar[str] = ContextVar("chat_id_var", default="")

_STREAM_HANDLER_NAME = "_aptos_helper_stream"
_FILE_HANDLER_NAME = "_aptos_helper_file"

# python-telegram-bot logs every getUpdates round trip at INFO/DEBUG.
NOISY_LOGGERS = ("httpx", "httpcore", "telegram", "apscheduler")


class ContextFilter(logging.Filter):
    """Copy the process role and the current user/chat onto each record."""

    def __init__(self, role: str) -> None:
        super().__init__()
        self.role = role

    def filter(self, record: logging.LogRecord) -> bool:
        record.role = self.role  # type: ignore[attr-defined]
        record.user_id = user_id_var.get()  # type: ignore[attr-defined]
        record.chat_id = chat_id_var.get()  # type: ignore[attr-defined]
        return True


class ContextFormatter(logging.Formatter):
    """``2026-10-18 14:30:01 [Bot][User 42][Chat 42][INFO] aptos_helper.bot.handlers:127 - ...``"""

    def format(self, record: logging.LogRecord) -> str:
        tags = ""
        if getattr(record, "role", ""):
            tags += f"[{record.role}]"  # type: ignore[attr-defined]
        if getattr(record, "user_id", ""):
            tags += f"[User {record.user_id}]"  # type: ignore[attr-defined]
        if getattr(record, "chat_id", ""):
            tags += f"[Chat {record.chat_id}]"  # type: ignore[attr-defined]
        tags += f"[{record.levelname}]"

        line = (
            f"{self.formatTime(record, self.datefmt)} {tags} "
            f"{record.name}:{record.lineno} - {record.getMessage()}"
        )
        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line += "\n" + record.exc_text
        return line


def _attach(root: logging.Logger, handler: logging.Handler, name: str, role: str) -> None:
    handler.name = name
    handler.addFilter(ContextFilter(role))
    handler.setFormatter(ContextFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)


def setup_logging(role: str) -> None:
    """Send root logging to stderr, plus a rotating file when ``LOG_FILE`` is set.

    A second call is a no-op.
    """
    from aptos_helper.config import settings

    root = logging.getLogger()
    if any(h.name == _STREAM_HANDLER_NAME for h in root.handlers):
        return

    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    _attach(root, logging.StreamHandler(sys.stderr), _STREAM_HANDLER_NAME, role)

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        _attach(root, file_handler, _FILE_HANDLER_NAME, role)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
