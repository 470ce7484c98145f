"""
services/menu_service.py
-------------------------
Renders each navigation screen to its text and inline keyboard.
Pure functions of the knowledge base: no I/O, no chat state.
"""

from dataclasses import dataclass
from typing import Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from models import navigation as nav
from models.knowledge import KnowledgeBase

BACK_LABEL = "🔙 Назад"

MAIN_MENU_TEXT = "📎Выберите необходимый раздел:"
EMPTY_KB_TEXT = "В базе знаний пока нет разделов."
TOPICS_TEXT = 'Выберите тему из раздела "{name}":'
NO_TOPICS_TEXT = "В выбранном разделе нет доступных тем."
SUBTOPICS_TEXT = '📌 Выберите подтему из темы "{title}":'
NO_SUBTOPICS_TEXT = "В выбранной теме нет доступных подтем."
ARTICLE_TEXT = "😎 Вот ссылка на статью:"
ARTICLE_BUTTON = "Ссылка на статью: {title}"
NO_ARTICLE_TEXT = "Статья не найдена."


@dataclass
class Screen:
    """
    One rendered screen.

    Attributes:
        text: Message text.
        reply_markup: Inline keyboard, or None for a plain message.
        standalone: Send as a separate message instead of editing the
            tracked navigation message.
        article_key: Set on an article screen; used for view counting.
    """
    text: str
    reply_markup: Optional[InlineKeyboardMarkup] = None
    standalone: bool = False
    article_key: Optional[str] = None


def _button(text: str, action: nav.CallbackAction) -> InlineKeyboardButton:
    return InlineKeyboardButton(text, callback_data=nav.encode(action))


def _back(action: nav.CallbackAction) -> list[InlineKeyboardButton]:
    return [_button(BACK_LABEL, action)]


class MenuService:
    """Builds screens for the section → topic → subtopic tree."""

    def __init__(self, knowledge_base: KnowledgeBase):
        self.kb = knowledge_base

    def render(self, action: nav.CallbackAction) -> Screen:
        """Render the screen a decoded button press leads to."""
        if action.kind == "main":
            return self.main_menu()
        if action.kind in ("section", "back_topic"):
            return self.topics(*action.indices)
        if action.kind == "topic":
            return self.subtopics(*action.indices)
        if action.kind == "subtopic":
            return self.article(*action.indices)
        raise ValueError(f"Unknown action kind: {action.kind}")

    def main_menu(self) -> Screen:
        if self.kb.is_empty():
            return Screen(EMPTY_KB_TEXT, standalone=True)

        rows = [
            [_button(section.name, nav.open_section(s))]
            for s, section in enumerate(self.kb.sections)
        ]
        return Screen(MAIN_MENU_TEXT, InlineKeyboardMarkup(rows))

    def topics(self, section_idx: int) -> Screen:
        section = self.kb.section(section_idx)
        if not section or not section.topics:
            return Screen(NO_TOPICS_TEXT, InlineKeyboardMarkup([_back(nav.main_menu())]))

        rows = [
            [_button(topic.title, nav.open_topic(section_idx, t))]
            for t, topic in enumerate(section.topics)
        ]
        rows.append(_back(nav.main_menu()))
        return Screen(TOPICS_TEXT.format(name=section.name), InlineKeyboardMarkup(rows))

    def subtopics(self, section_idx: int, topic_idx: int) -> Screen:
        topic = self.kb.topic(section_idx, topic_idx)
        back = _back(nav.back_to_topics(section_idx))
        if not topic or not topic.subtopics:
            return Screen(NO_SUBTOPICS_TEXT, InlineKeyboardMarkup([back]))

        rows = [
            [_button(subtopic.title, nav.open_subtopic(section_idx, topic_idx, u))]
            for u, subtopic in enumerate(topic.subtopics)
        ]
        rows.append(back)
        return Screen(SUBTOPICS_TEXT.format(title=topic.title), InlineKeyboardMarkup(rows))

    def article(self, section_idx: int, topic_idx: int, subtopic_idx: int) -> Screen:
        subtopic = self.kb.subtopic(section_idx, topic_idx, subtopic_idx)
        back = _back(nav.back_to_topics(section_idx))
        if not subtopic or not subtopic.link:
            return Screen(NO_ARTICLE_TEXT, InlineKeyboardMarkup([back]))

        rows = [
            [InlineKeyboardButton(ARTICLE_BUTTON.format(title=subtopic.title), url=subtopic.link)],
            back,
        ]
        section = self.kb.section(section_idx)
        topic = self.kb.topic(section_idx, topic_idx)
        key = f"{section.name} / {topic.title} / {subtopic.title}"
        return Screen(ARTICLE_TEXT, InlineKeyboardMarkup(rows), article_key=key)
