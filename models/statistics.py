"""
models/statistics.py
--------------------
Domain model for the bot's usage counters.
"""

from dataclasses import dataclass, field

from utils.logger import get_logger

logger = get_logger(__name__)


def _is_count(value) -> bool:
    # bool is an int subclass; floats (NaN and Infinity included) are not counts
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass
class Statistics:
    """
    Usage counters persisted between restarts.

    Attributes:
        start_command_count: How many times /start was issued.
        article_views: Views per article, keyed by its title path.
    """
    start_command_count: int = 0
    article_views: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict) -> "Statistics":
        """
        Raises:
            ValueError: If the document does not have the expected shape.
        """
        if not isinstance(raw, dict):
            raise ValueError("statistics must be a JSON object")
        count = raw.get("start_command_count")
        views = raw.get("article_views")
        if not _is_count(count) or not isinstance(views, dict):
            raise ValueError("statistics must contain 'start_command_count' and 'article_views'")

        article_views = {}
        for key, value in views.items():
            if _is_count(value):
                article_views[str(key)] = value
            else:
                logger.warning(f"Dropping malformed view count for {key!r}: {value!r}")
        return cls(start_command_count=count, article_views=article_views)

    def to_dict(self) -> dict:
        return {
            "start_command_count": self.start_command_count,
            "article_views": dict(self.article_views),
        }

    @property
    def total_views(self) -> int:
        return sum(self.article_views.values())

    def top_articles(self, limit: int) -> list[tuple[str, int]]:
        """Most viewed articles first; ties keep alphabetical order."""
        ranked = sorted(self.article_views.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[:limit]
