"""
repositories/statistics_repo.py
--------------------------------
Data access layer for the usage counters file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

from config import STATISTICS_PATH
from models.statistics import Statistics
from utils.logger import get_logger

logger = get_logger(__name__)


class StatisticsRepository:
    """Reads and writes the statistics JSON file. Single writer only."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path or STATISTICS_PATH)

    def load(self) -> Statistics:
        """
        Read the counters from disk.

        Returns:
            The stored counters. A missing file yields zeroed counters;
            an unreadable or malformed one is logged and also yields zeroes.
        """
        if not self.path.exists():
            return Statistics()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return Statistics.from_dict(raw)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load statistics from {self.path}: {e}")
            return Statistics()

    def save(self, stats: Statistics) -> None:
        """
        Write the counters as pretty-printed JSON.

        The file is replaced atomically so a crash mid-write cannot leave
        a truncated document behind.

        Raises:
            OSError: If the file cannot be written.
        """
        payload = json.dumps(stats.to_dict(), ensure_ascii=False, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to save statistics to {self.path}: {e}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
