"""
models/navigation.py
--------------------
Per-chat UI state and the callback-data scheme carried by inline buttons.

Callback data strings (indices are zero-based):
    back_main               → section list
    section_{s}             → topics of section s
    topic_{s}_{t}           → subtopics of topic t
    subtopic_{s}_{t}_{u}    → article link of subtopic u
    back_topic_{s}          → back to topics of section s
    back_section_{s}        → legacy alias of back_topic_{s}, decoded only
"""

from dataclasses import dataclass, field
from typing import Optional


class Level:
    """Names of the screens a chat can be on."""
    MAIN = "main"
    TOPICS = "topics"
    SUBTOPICS = "subtopics"
    ARTICLE = "article"


@dataclass
class ChatState:
    """
    UI state of a single chat.

    Attributes:
        level: The screen currently shown (a ``Level`` value).
        data: Index path of that screen, empty for the main menu.
        message_id: The bot message that navigation edits in place,
            or None if the next screen must be sent as a new message.
    """
    level: str = Level.MAIN
    data: tuple[int, ...] = ()
    message_id: Optional[int] = None


# ── Callback data ─────────────────────────────────────────

BACK_MAIN = "back_main"

_PREFIXES = {
    # prefix: (action kind, number of indices)
    "back_topic_": ("back_topic", 1),
    "back_section_": ("back_topic", 1),
    "section_": ("section", 1),
    "topic_": ("topic", 2),
    "subtopic_": ("subtopic", 3),
}


@dataclass(frozen=True)
class CallbackAction:
    """
    A decoded button press.

    ``kind`` is one of: main, section, topic, subtopic, back_topic.
    """
    kind: str
    indices: tuple[int, ...] = field(default_factory=tuple)

    @property
    def level(self) -> str:
        """The screen this action leads to."""
        return {
            "main": Level.MAIN,
            "section": Level.TOPICS,
            "back_topic": Level.TOPICS,
            "topic": Level.SUBTOPICS,
            "subtopic": Level.ARTICLE,
        }[self.kind]


def encode(action: CallbackAction) -> str:
    """Build the callback data string for an action."""
    if action.kind == "main":
        return BACK_MAIN
    return "_".join([action.kind, *(str(i) for i in action.indices)])


def decode(data: Optional[str]) -> Optional[CallbackAction]:
    """
    Parse callback data into an action.

    Returns:
        The action, or None if the data is not something this bot emits.
    """
    if not data:
        return None
    if data == BACK_MAIN:
        return CallbackAction("main")

    for prefix, (kind, arity) in _PREFIXES.items():
        if not data.startswith(prefix):
            continue
        parts = data[len(prefix):].split("_")
        if len(parts) != arity or not all(p.isascii() and p.isdigit() for p in parts):
            return None
        return CallbackAction(kind, tuple(int(p) for p in parts))
    return None


def main_menu() -> CallbackAction:
    return CallbackAction("main")


def open_section(section_idx: int) -> CallbackAction:
    return CallbackAction("section", (section_idx,))


def open_topic(section_idx: int, topic_idx: int) -> CallbackAction:
    return CallbackAction("topic", (section_idx, topic_idx))


def open_subtopic(section_idx: int, topic_idx: int, subtopic_idx: int) -> CallbackAction:
    return CallbackAction("subtopic", (section_idx, topic_idx, subtopic_idx))


def back_to_topics(section_idx: int) -> CallbackAction:
    return CallbackAction("back_topic", (section_idx,))
