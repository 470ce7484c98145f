"""
handlers/navigation_handler.py
-------------------------------
Handles inline button presses on the navigation menu.
Delegates all logic to NavigationService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.rate_limiter import rate_limited
from services.registry import get_navigation
from utils.logger import get_logger

logger = get_logger(__name__)

UNKNOWN_REQUEST_TEXT = "Неизвестный запрос"


@rate_limited
async def handle_callback_query(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle a button press.

    Known data moves the chat's menu to the requested screen.
    Unknown data is answered with an alert and changes nothing.
    """
    query = update.callback_query
    message = query.message
    if message is None:
        # button on a message too old for Telegram to return
        await query.answer(UNKNOWN_REQUEST_TEXT, show_alert=True)
        return

    handled = await get_navigation(context).handle_callback(
        context.bot, message.chat.id, query.data, message.message_id
    )
    if handled:
        await query.answer()
    else:
        await query.answer(UNKNOWN_REQUEST_TEXT, show_alert=True)
