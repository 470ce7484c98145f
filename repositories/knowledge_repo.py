"""
repositories/knowledge_repo.py
-------------------------------
Data access layer for the knowledge base JSON file.
The file is read-only for the bot: it is loaded at startup and on reload().
"""

import json
from pathlib import Path
from typing import Optional

from config import KNOWLEDGE_BASE_PATH
from models.knowledge import KnowledgeBase
from utils.logger import get_logger

logger = get_logger(__name__)


class KnowledgeRepository:
    """Loads and holds the knowledge base tree."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or KNOWLEDGE_BASE_PATH)
        self._kb: Optional[KnowledgeBase] = None

    @property
    def knowledge_base(self) -> KnowledgeBase:
        """The loaded tree; the file is read on first access."""
        if self._kb is None:
            self._kb = self.load()
        return self._kb

    def load(self) -> KnowledgeBase:
        """
        Read and validate the knowledge base file.

        Returns:
            The parsed tree, or an empty one if the file is missing or invalid.
            The bot keeps running with an empty menu in that case.
        """
        if not self.path.exists():
            logger.error(f"Knowledge base file not found: {self.path}")
            return KnowledgeBase()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            kb = KnowledgeBase.from_dict(raw)
        except (OSError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Failed to load knowledge base from {self.path}: {e}")
            return KnowledgeBase()

        logger.info(f"Loaded knowledge base with {len(kb.sections)} section(s) from {self.path}")
        return kb

    def reload(self) -> KnowledgeBase:
        """Re-read the file from disk and replace the cached tree."""
        self._kb = self.load()
        return self._kb
