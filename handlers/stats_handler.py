"""
handlers/stats_handler.py
--------------------------
Handles the /stats command.
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.rate_limiter import rate_limited
from services.registry import get_statistics


@rate_limited
async def stats_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /stats command - show usage counters."""
    await update.message.reply_text(get_statistics(context).report())
