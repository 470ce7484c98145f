"""
services/state_service.py
--------------------------
In-memory tracker of each chat's navigation state.
Nothing here is persisted: after a restart chats re-adopt their
navigation message from the next button press.
"""

from typing import Optional

from models.navigation import ChatState, Level
from utils.logger import get_logger

logger = get_logger(__name__)


class ChatStateTracker:
    """Maps chat_id → ChatState."""

    def __init__(self):
        self._states: dict[int, ChatState] = {}

    def get(self, chat_id: int) -> Optional[ChatState]:
        return self._states.get(chat_id)

    def reset(self, chat_id: int) -> ChatState:
        """Start over on the main menu with no message to edit."""
        state = ChatState()
        self._states[chat_id] = state
        return state

    def ensure(self, chat_id: int, message_id: Optional[int] = None) -> ChatState:
        """
        Return the chat's state, creating it if needed.

        Args:
            chat_id: Telegram chat ID.
            message_id: Message that carried the pressed button. A newly
                created state adopts it so navigation keeps editing it.
        """
        state = self._states.get(chat_id)
        if state is None:
            state = ChatState(message_id=message_id)
            self._states[chat_id] = state
            logger.debug(f"Created state for chat {chat_id} (message {message_id})")
        return state

    def move(self, chat_id: int, level: str, data: tuple[int, ...] = ()) -> ChatState:
        """Record the screen now shown in the chat."""
        state = self.ensure(chat_id)
        state.level = level
        state.data = tuple(data) if level != Level.MAIN else ()
        return state

    def bind_message(self, chat_id: int, message_id: Optional[int]) -> None:
        """Remember which message the chat's navigation edits."""
        self.ensure(chat_id).message_id = message_id

    def __len__(self) -> int:
        return len(self._states)
