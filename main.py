"""
main.py
-------
Entry point for the KnowledgeBot Telegram bot.

Responsibilities:
    - Load the knowledge base and the usage counters.
    - Configure and start the Telegram bot with all handlers.
"""

import sys

from telegram import BotCommand
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    CommandHandler,
)

from config import TELEGRAM_BOT_TOKEN
from handlers.error_handler import error_handler
from handlers.navigation_handler import handle_callback_query
from handlers.start_handler import start_command, help_command
from handlers.stats_handler import stats_command
from services.registry import install_services
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "🚀 Главное меню"),
        BotCommand("help", "📖 Справка"),
        BotCommand("stats", "📊 Статистика"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


def build_application(token: str) -> Application:
    """Create the Telegram application with services and handlers wired in."""
    app = Application.builder().token(token).post_init(set_bot_commands).build()

    navigation = install_services(app.bot_data)
    sections = len(navigation.knowledge_repo.knowledge_base.sections)
    logger.info(f"Knowledge base ready: {sections} section(s).")

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    app.add_handler(CommandHandler("stats", stats_command))
    app.add_handler(CallbackQueryHandler(handle_callback_query))
    app.add_error_handler(error_handler)
    return app


def main() -> None:
    """Initialize and run the bot."""
    if not TELEGRAM_BOT_TOKEN:
        logger.error("TELEGRAM_BOT_TOKEN is not set. Add it to the .env file.")
        sys.exit(1)

    logger.info("Starting Telegram bot...")
    app = build_application(TELEGRAM_BOT_TOKEN)

    logger.info("🚀 KnowledgeBot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message", "callback_query"])
    logger.info("KnowledgeBot stopped.")


if __name__ == "__main__":
    main()
