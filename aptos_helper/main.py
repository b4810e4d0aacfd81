#!/usr/bin/env python3
"""
Aptos Community Helper Bot - Entry point.

Starts the health check server and the Telegram poller.
"""
import logging
import sys
import threading

import uvicorn
from fastapi import FastAPI

from aptos_helper import __version__
from aptos_helper.api.health import router as health_router
from aptos_helper.config import settings
from aptos_helper.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_api() -> FastAPI:
    """Create FastAPI application."""
    app = FastAPI(
        title="Aptos Community Helper Bot",
        description="Health checks for the Aptos Community Helper Bot",
        version=__version__,
    )

    app.include_router(health_router)

    return app


def run_api_server() -> None:
    """Run the FastAPI server in a separate thread."""
    app = create_api()
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level="info", log_config=None)


def check_configuration() -> None:
    """Exit the process when required settings are missing."""
    if not settings.TELEGRAM_BOT_TOKEN:
        logger.error(
            "Failed to start bot: TELEGRAM_BOT_TOKEN is required in environment variables"
        )
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    setup_logging("Bot")
    check_configuration()

    if settings.HEALTH_ENABLED:
        api_thread = threading.Thread(target=run_api_server, daemon=True)
        api_thread.start()
        logger.info(f"Health check server running on port {settings.PORT}")

    # Imported late so a missing token fails before any handler is built
    from aptos_helper.bot.poller import run_polling

    run_polling()


if __name__ == "__main__":
    main()
