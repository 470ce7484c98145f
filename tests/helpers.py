"""Shared fixtures for the test-suite: sample data and fake Telegram objects."""

import json
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock

SAMPLE_KB = {
    "sections": [
        {
            "name": "Onboarding",
            "topics": [
                {
                    "title": "Access",
                    "subtopics": [
                        {"title": "VPN", "link": "https://example.com/vpn"},
                        {"title": "Mail", "link": "https://example.com/mail"},
                    ],
                },
                {"title": "Empty topic", "subtopics": []},
                {
                    "title": "Drafts",
                    "subtopics": [{"title": "Unpublished"}],
                },
            ],
        },
        {"name": "Empty section", "topics": []},
    ]
}


def write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def make_bot(first_message_id: int = 100) -> AsyncMock:
    """A bot whose send_message returns messages with increasing ids."""
    bot = AsyncMock()
    counter = {"next": first_message_id}

    async def _send_message(**kwargs):
        message_id = counter["next"]
        counter["next"] += 1
        return SimpleNamespace(message_id=message_id, chat_id=kwargs.get("chat_id"))

    bot.send_message.side_effect = _send_message
    return bot


def make_command_update(chat_id: int = 10, user_id: int = 1) -> SimpleNamespace:
    message = SimpleNamespace(reply_text=AsyncMock())
    return SimpleNamespace(
        effective_user=SimpleNamespace(id=user_id),
        effective_chat=SimpleNamespace(id=chat_id),
        effective_message=message,
        message=message,
        callback_query=None,
    )


def make_callback_update(
    data: str, chat_id: int = 10, message_id: int = 55, user_id: int = 1
) -> SimpleNamespace:
    message = SimpleNamespace(chat=SimpleNamespace(id=chat_id), message_id=message_id)
    query = SimpleNamespace(data=data, message=message, answer=AsyncMock())
    return SimpleNamespace(
        effective_user=SimpleNamespace(id=user_id),
        effective_chat=SimpleNamespace(id=chat_id),
        effective_message=message,
        message=None,
        callback_query=query,
    )


def make_context(bot=None, bot_data=None) -> SimpleNamespace:
    return SimpleNamespace(bot=bot or make_bot(), bot_data={} if bot_data is None else bot_data)


def keyboard_data(markup) -> list[list[str]]:
    """callback_data (or url) of every button, row by row."""
    return [
        [button.callback_data or button.url for button in row]
        for row in markup.inline_keyboard
    ]
