"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
/start counts the launch and opens a fresh navigation menu.
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.rate_limiter import rate_limited
from services.registry import get_navigation, get_statistics
from utils.logger import get_logger

logger = get_logger(__name__)

WELCOME_TEXT = "🖐 Привет! Я ваш бот для работы с базой знаний."

HELP_TEXT = """
📚 *База знаний*

Выберите раздел, затем тему и подтему, чтобы получить ссылку на статью.
Кнопка «🔙 Назад» возвращает на предыдущий уровень.

*🔧 Команды:*
/start - открыть главное меню
/help - показать справку
/stats - статистика использования
"""


@rate_limited
async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - reset navigation, count the launch, show the main menu."""
    chat_id = update.effective_chat.id
    navigation = get_navigation(context)

    navigation.start(chat_id)
    total = get_statistics(context).record_start()
    logger.info(f"Chat {chat_id} started the bot (start #{total}).")

    await update.message.reply_text(WELCOME_TEXT, parse_mode="Markdown")
    await navigation.show_main_menu(context.bot, chat_id)


@rate_limited
async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /help command - explain how to navigate."""
    await update.message.reply_text(HELP_TEXT, parse_mode="Markdown")
