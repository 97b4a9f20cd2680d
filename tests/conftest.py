"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

import pytest

from wellness_tracker.config import Settings
from wellness_tracker.containers import AppContainer, build_container
from wellness_tracker.domain.entries import ExerciseEntry, MealEntry, MealSlot
from wellness_tracker.services.achievements import AchievementService
from wellness_tracker.services.catalog import CatalogService
from wellness_tracker.services.entries import EntryBuilder
from wellness_tracker.services.goals import GoalService
from wellness_tracker.services.sessions import SessionService
from wellness_tracker.services.stats import StatsService

FIXED_NOW = datetime(2026, 10, 19, 8, 5)


@dataclass
class FixedClock:
    """Clock that always returns the same moment."""

    now: datetime = FIXED_NOW

    def __call__(self) -> datetime:
        return self.now


@dataclass
class SequentialIds:
    """Id factory producing predictable UUIDs."""

    issued: list[UUID] = field(default_factory=list)

    def __call__(self) -> UUID:
        value = UUID(int=len(self.issued) + 1)
        self.issued.append(value)
        return value


def make_meal(
    slot: MealSlot = MealSlot.BREAKFAST,
    *,
    pcos_score: int = 7,
    calories: int = 100,
    name: str = "Custom",
    index: int = 1,
) -> MealEntry:
    return MealEntry(
        id=UUID(int=index),
        meal_slot=slot,
        name=name,
        calories=calories,
        logged_at_time="08:05 AM",
        pcos_score=pcos_score,
    )


def make_exercise(
    minutes: int = 30,
    *,
    calories: int = 150,
    name: str = "Custom",
    index: int = 1,
) -> ExerciseEntry:
    return ExerciseEntry(
        id=UUID(int=1000 + index),
        name=name,
        duration_minutes=minutes,
        calories=calories,
        type="Cardio",
        logged_at_time="08:05 AM",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(time_format="%H:%M", log_level="DEBUG", environment="test")


@pytest.fixture
def catalog_service() -> CatalogService:
    return CatalogService()


@pytest.fixture
def id_factory() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def entry_builder(
    catalog_service: CatalogService, id_factory: SequentialIds
) -> EntryBuilder:
    return EntryBuilder(
        catalog=catalog_service,
        clock=FixedClock(),
        id_factory=id_factory,
    )


@pytest.fixture
def session_service(entry_builder: EntryBuilder) -> SessionService:
    return SessionService(
        entry_builder=entry_builder,
        stats_service=StatsService(),
        achievement_service=AchievementService(),
        goal_service=GoalService(),
    )


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
