"""
services/registry.py
---------------------
Stores the stateful services in ``application.bot_data`` so every handler
shares one chat-state tracker and one set of counters.
"""

from typing import Any, Optional

from telegram.ext import ContextTypes

from repositories.knowledge_repo import KnowledgeRepository
from repositories.statistics_repo import StatisticsRepository
from services.navigation_service import NavigationService
from services.statistics_service import StatisticsService

NAVIGATION_KEY = "navigation_service"
STATISTICS_KEY = "statistics_service"


def install_services(
    bot_data: dict[str, Any],
    knowledge_repo: Optional[KnowledgeRepository] = None,
    statistics_repo: Optional[StatisticsRepository] = None,
) -> NavigationService:
    """
    Create the services and register them in ``bot_data``.

    Args:
        bot_data: ``application.bot_data`` (any dict in tests).
        knowledge_repo: Defaults to the file named by KNOWLEDGE_BASE_PATH.
        statistics_repo: Defaults to the file named by STATISTICS_PATH.

    Returns:
        The navigation service.
    """
    knowledge_repo = knowledge_repo or KnowledgeRepository()
    statistics = StatisticsService(statistics_repo)
    navigation = NavigationService(knowledge_repo, statistics)
    bot_data[STATISTICS_KEY] = statistics
    bot_data[NAVIGATION_KEY] = navigation
    return navigation


def _lookup(context: ContextTypes.DEFAULT_TYPE, key: str):
    service = context.bot_data.get(key)
    if service is None:
        raise RuntimeError(f"{key} not installed. Call install_services() first.")
    return service


def get_navigation(context: ContextTypes.DEFAULT_TYPE) -> NavigationService:
    return _lookup(context, NAVIGATION_KEY)


def get_statistics(context: ContextTypes.DEFAULT_TYPE) -> StatisticsService:
    return _lookup(context, STATISTICS_KEY)
