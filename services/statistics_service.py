"""
services/statistics_service.py
-------------------------------
Business logic for the usage counters: /start count and article views.
Counters live in memory and are written to disk after every change.
"""

from typing import Optional

from config import STATS_TOP_ARTICLES
from repositories.statistics_repo import StatisticsRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class StatisticsService:
    """Counts usage and formats the /stats report."""

    def __init__(self, repo: Optional[StatisticsRepository] = None):
        self.repo = repo or StatisticsRepository()
        self.stats = self.repo.load()

    def record_start(self) -> int:
        """Count one /start. Returns the new total."""
        self.stats.start_command_count += 1
        self._save()
        return self.stats.start_command_count

    def record_article_view(self, key: str) -> int:
        """Count one view of an article. Returns its new view count."""
        views = self.stats.article_views.get(key, 0) + 1
        self.stats.article_views[key] = views
        self._save()
        return views

    def report(self, top: int = STATS_TOP_ARTICLES) -> str:
        """Format the counters for a chat message."""
        lines = [
            "📊 Статистика бота",
            "",
            f"🚀 Запусков /start: {self.stats.start_command_count}",
            f"👀 Просмотров статей: {self.stats.total_views}",
        ]
        top_articles = self.stats.top_articles(top)
        if top_articles:
            lines.append("")
            lines.append("🏆 Популярные статьи:")
            for rank, (key, views) in enumerate(top_articles, start=1):
                lines.append(f"{rank}. {key}: {views}")
        return "\n".join(lines)

    def _save(self) -> None:
        try:
            self.repo.save(self.stats)
        except OSError:
            # already logged by the repository; counters stay in memory
            logger.warning("Statistics not persisted, will retry on next update.")
