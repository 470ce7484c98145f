"""
handlers/error_handler.py
--------------------------
Application-wide error handler: logs anything a handler raised.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log the error together with the chat it happened in."""
    chat_id = None
    if isinstance(update, Update) and update.effective_chat is not None:
        chat_id = update.effective_chat.id
    logger.error(f"Exception while handling an update (chat {chat_id}):", exc_info=context.error)
