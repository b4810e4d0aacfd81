"""Telegram polling setup using python-telegram-bot."""
import logging

from telegram.ext import Application, CommandHandler, MessageHandler, filters

from aptos_helper.bot.handlers import CommandDispatcher, error_handler
from aptos_helper.config import settings

logger = logging.getLogger(__name__)


def register_handlers(app: Application, dispatcher: CommandDispatcher) -> None:
    """Attach command, message and error handlers to *app*."""
    app.add_handler(CommandHandler("start", dispatcher.start_handler))
    app.add_handler(CommandHandler("help", dispatcher.help_handler))
    app.add_handler(CommandHandler("balance", dispatcher.balance_handler))
    app.add_handler(CommandHandler("faucet", dispatcher.faucet_handler))
    app.add_handler(CommandHandler("learn", dispatcher.learn_handler))

    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, dispatcher.message_handler))

    app.add_error_handler(error_handler)


def create_application(dispatcher: CommandDispatcher | None = None) -> Application:
    """Create and configure the Telegram application."""
    dispatcher = dispatcher or CommandDispatcher()

    async def on_startup(application: Application) -> None:
        """Initialize on startup."""
        logger.info("🤖 Aptos Community Helper Bot started successfully!")

    async def on_shutdown(application: Application) -> None:
        """Cleanup on shutdown."""
        logger.info("Shutting down bot...")
        await dispatcher.aptos_service.close()
        logger.info("Bot shutdown complete")

    app = Application.builder().token(settings.TELEGRAM_BOT_TOKEN).build()

    register_handlers(app, dispatcher)

    # Lifecycle hooks
    app.post_init = on_startup
    app.post_shutdown = on_shutdown

    return app


def run_polling() -> None:
    """Run the bot with polling."""
    logger.info("Starting Telegram bot with polling...")

    app = create_application()
    app.run_polling(allowed_updates=["message"])
