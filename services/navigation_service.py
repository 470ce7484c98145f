"""
services/navigation_service.py
-------------------------------
In-place menu navigation.

Every chat has one navigation message. Button presses edit that message
to show the next screen, so moving through the tree feels like a
client-side menu instead of a growing stream of messages.

Workflow for a button press:
    1. Decode the callback data.
    2. Render the target screen from the knowledge base.
    3. Edit the tracked message, or send a new one and track it.
    4. Record the new screen in the chat's state.
"""

from typing import Optional

from telegram import Bot
from telegram.error import BadRequest, TelegramError

from models import navigation as nav
from repositories.knowledge_repo import KnowledgeRepository
from services.menu_service import MenuService, Screen
from services.state_service import ChatStateTracker
from services.statistics_service import StatisticsService
from utils.logger import get_logger

logger = get_logger(__name__)


class NavigationService:
    """Walks the knowledge base tree for each chat."""

    def __init__(
        self,
        knowledge_repo: KnowledgeRepository,
        statistics: StatisticsService,
        states: Optional[ChatStateTracker] = None,
    ):
        self.knowledge_repo = knowledge_repo
        self.statistics = statistics
        self.states = states or ChatStateTracker()

    @property
    def menu(self) -> MenuService:
        return MenuService(self.knowledge_repo.knowledge_base)

    # ── Entry points ──────────────────────────────────────

    def start(self, chat_id: int) -> None:
        """Forget the chat's navigation message; the next menu is sent fresh."""
        self.states.reset(chat_id)

    async def show_main_menu(self, bot: Bot, chat_id: int) -> None:
        await self.show(bot, chat_id, nav.main_menu())

    async def handle_callback(
        self, bot: Bot, chat_id: int, data: Optional[str], message_id: Optional[int] = None
    ) -> bool:
        """
        Handle one inline button press.

        Args:
            bot: The bot used to send or edit messages.
            chat_id: Chat the button was pressed in.
            data: Raw callback data.
            message_id: Message that carried the button.

        Returns:
            False if the data was not recognised, True otherwise.
        """
        action = nav.decode(data)
        if action is None:
            logger.warning(f"Unknown callback data {data!r} in chat {chat_id}")
            return False

        self.states.ensure(chat_id, message_id)
        await self.show(bot, chat_id, action)
        return True

    async def show(self, bot: Bot, chat_id: int, action: nav.CallbackAction) -> bool:
        """
        Render the screen for an action and put it on the chat.

        Returns:
            True if the screen reached the chat. Chat state and article
            views change only in that case.
        """
        screen = self.menu.render(action)

        if screen.standalone:
            return await self._send(bot, chat_id, screen) is not None

        if not await self.send_or_edit(bot, chat_id, screen):
            return False

        self.states.move(chat_id, action.level, action.indices)
        if screen.article_key:
            self.statistics.record_article_view(screen.article_key)
        return True

    # ── Send or edit ──────────────────────────────────────

    async def send_or_edit(self, bot: Bot, chat_id: int, screen: Screen) -> bool:
        """
        Show a screen in the chat's navigation message.

        Edits the tracked message when there is one. Sends a new message
        when there is none, or when the tracked one can no longer be edited,
        and tracks the new message from then on.

        Returns:
            True if the chat now shows the screen ("not modified" counts).
        """
        state = self.states.ensure(chat_id)

        if state.message_id is not None:
            try:
                await bot.edit_message_text(
                    text=screen.text,
                    chat_id=chat_id,
                    message_id=state.message_id,
                    reply_markup=screen.reply_markup,
                )
                return True
            except BadRequest as e:
                if "not modified" in str(e).lower():
                    return True
                logger.error(f"Failed to edit message {state.message_id} in chat {chat_id}: {e}")
            except TelegramError as e:
                logger.error(f"Failed to edit message {state.message_id} in chat {chat_id}: {e}")
                return False

        message = await self._send(bot, chat_id, screen)
        if message is None:
            return False
        self.states.bind_message(chat_id, message.message_id)
        return True

    async def _send(self, bot: Bot, chat_id: int, screen: Screen):
        try:
            return await bot.send_message(
                chat_id=chat_id,
                text=screen.text,
                reply_markup=screen.reply_markup,
            )
        except TelegramError as e:
            logger.error(f"Failed to send message to chat {chat_id}: {e}")
            return None
