"""
security/rate_limiter.py
-------------------------
Rate limiting middleware to keep a single user from flooding the bot.
Counts both commands and inline button presses per user within a time window.
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import RATE_LIMIT_MESSAGES, RATE_LIMIT_WINDOW_SECONDS
from utils.logger import get_logger

logger = get_logger(__name__)

RATE_LIMIT_TEXT = "⚠️ Слишком много запросов. Подождите немного и попробуйте снова."

# {user_id: [timestamp1, timestamp2, ...]}
_user_timestamps: dict[int, list[float]] = defaultdict(list)


def _cleanup(user_id: int, now: float) -> None:
    """Remove expired timestamps for a user; idle users are dropped entirely."""
    cutoff = now - RATE_LIMIT_WINDOW_SECONDS
    recent = [t for t in _user_timestamps.get(user_id, []) if t > cutoff]
    if recent:
        _user_timestamps[user_id] = recent
    else:
        _user_timestamps.pop(user_id, None)


def reset() -> None:
    """Forget all recorded requests."""
    _user_timestamps.clear()


async def _reject(update: Update) -> None:
    if update.callback_query is not None:
        await update.callback_query.answer(RATE_LIMIT_TEXT, show_alert=True)
    elif update.effective_message is not None:
        await update.effective_message.reply_text(RATE_LIMIT_TEXT)


def rate_limited(func: Callable):
    """
    Decorator that enforces rate limiting per user.

    Configuration (via .env):
        RATE_LIMIT_MESSAGES: Max requests per window (default: 30).
        RATE_LIMIT_WINDOW_SECONDS: Window duration in seconds (default: 60).

    Behavior:
        - Commands over the limit get a reply.
        - Button presses over the limit get an alert and do not navigate.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        now = time.monotonic()
        _cleanup(user.id, now)

        if len(_user_timestamps.get(user.id, [])) >= RATE_LIMIT_MESSAGES:
            logger.warning(f"⚠️ Rate limit hit for user {user.id}")
            await _reject(update)
            return

        _user_timestamps[user.id].append(now)
        return await func(update, context, *args, **kwargs)

    return wrapper
