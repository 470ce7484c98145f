"""
models/knowledge.py
-------------------
Domain model for the knowledge base tree: sections → topics → subtopics.
"""

from dataclasses import dataclass, field
from typing import Optional

from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Subtopic:
    """A leaf of the tree: a titled link to an article."""
    title: str
    link: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict) -> "Subtopic":
        link = raw.get("link")
        link = link.strip() if isinstance(link, str) else ""
        return cls(title=_text(raw, "title"), link=link or None)


@dataclass
class Topic:
    """A group of subtopics inside a section."""
    title: str
    subtopics: list[Subtopic] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict) -> "Topic":
        return cls(
            title=_text(raw, "title"),
            subtopics=[Subtopic.from_dict(s) for s in _objects(raw.get("subtopics"), "subtopic", "title")],
        )


@dataclass
class Section:
    """A top-level entry of the main menu."""
    name: str
    topics: list[Topic] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict) -> "Section":
        return cls(
            name=_text(raw, "name"),
            topics=[Topic.from_dict(t) for t in _objects(raw.get("topics"), "topic", "title")],
        )


@dataclass
class KnowledgeBase:
    """
    The whole navigable tree.

    Lookups take zero-based indices, the same ones carried in callback data,
    and return None for anything out of range.
    """
    sections: list[Section] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict) -> "KnowledgeBase":
        """
        Build the tree from the parsed JSON document.

        Raises:
            ValueError: If the root has no ``sections`` list.
        """
        if not isinstance(raw, dict) or not isinstance(raw.get("sections"), list):
            raise ValueError("knowledge base must be an object with a 'sections' list")
        return cls(sections=[Section.from_dict(s) for s in _objects(raw["sections"], "section", "name")])

    def is_empty(self) -> bool:
        return not self.sections

    def section(self, section_idx: int) -> Optional[Section]:
        return _at(self.sections, section_idx)

    def topic(self, section_idx: int, topic_idx: int) -> Optional[Topic]:
        section = self.section(section_idx)
        return _at(section.topics, topic_idx) if section else None

    def subtopic(self, section_idx: int, topic_idx: int, subtopic_idx: int) -> Optional[Subtopic]:
        topic = self.topic(section_idx, topic_idx)
        return _at(topic.subtopics, subtopic_idx) if topic else None


def _at(items: list, idx: int):
    if 0 <= idx < len(items):
        return items[idx]
    return None


def _text(raw: dict, key: str) -> str:
    """Button label from a JSON field; numbers are stringified, anything else is empty."""
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return ""
    return str(value).strip()


def _objects(value, kind: str, title_key: str) -> list[dict]:
    """
    Keep the JSON objects of a list that have a label under ``title_key``.

    Telegram rejects empty button text, so untitled entries are skipped.
    A non-list counts as empty.
    """
    if not isinstance(value, list):
        return []
    result = []
    for item in value:
        if not isinstance(item, dict):
            logger.warning(f"Skipping malformed {kind} entry: {item!r}")
        elif not _text(item, title_key):
            logger.warning(f"Skipping {kind} entry without '{title_key}': {item!r}")
        else:
            result.append(item)
    return result
