"""Dependency container wiring for the application."""

from dataclasses import dataclass

from wellness_tracker.app_logging import configure_logging
from wellness_tracker.config import Settings
from wellness_tracker.services.achievements import AchievementService
from wellness_tracker.services.catalog import CatalogService
from wellness_tracker.services.entries import EntryBuilder
from wellness_tracker.services.goals import GoalService
from wellness_tracker.services.sessions import SessionService
from wellness_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    entry_builder: EntryBuilder
    stats_service: StatsService
    achievement_service: AchievementService
    goal_service: GoalService
    session_service: SessionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    catalog_service = CatalogService()
    entry_builder = EntryBuilder(
        catalog=catalog_service,
        time_format=resolved_settings.time_format,
    )
    stats_service = StatsService()
    achievement_service = AchievementService()
    goal_service = GoalService()
    session_service = SessionService(
        entry_builder=entry_builder,
        stats_service=stats_service,
        achievement_service=achievement_service,
        goal_service=goal_service,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        entry_builder=entry_builder,
        stats_service=stats_service,
        achievement_service=achievement_service,
        goal_service=goal_service,
        session_service=session_service,
    )
