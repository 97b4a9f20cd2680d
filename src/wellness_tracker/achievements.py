"""Achievement badge configuration."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from wellness_tracker.domain.entries import MealSlot
from wellness_tracker.domain.sessions import DaySession
from wellness_tracker.domain.stats import DailyAggregate

PCOS_WARRIOR_SCORE = 8

AchievementPredicate = Callable[[DailyAggregate, DaySession], bool]


@dataclass(frozen=True)
class AchievementDefinition:
    """Declarative badge definition."""

    title: str
    description: str
    icon: str
    predicate: AchievementPredicate


def _has_meal(aggregate: DailyAggregate, session: DaySession) -> bool:
    return len(session.meals) > 0


def _has_exercise(aggregate: DailyAggregate, session: DaySession) -> bool:
    return len(session.exercises) > 0


def _high_pcos_average(aggregate: DailyAggregate, session: DaySession) -> bool:
    return aggregate.average_pcos_score >= PCOS_WARRIOR_SCORE


def _all_slots_filled(aggregate: DailyAggregate, session: DaySession) -> bool:
    return all(slot in aggregate.meal_slots_filled for slot in MealSlot)


class Achievement(Enum):
    """Enum of achievements in display order."""

    FIRST_MEAL = AchievementDefinition(
        "First Meal Logged",
        "Great start on your wellness journey!",
        "\U0001f34e",
        _has_meal,
    )
    EXERCISE_ENTHUSIAST = AchievementDefinition(
        "Exercise Enthusiast",
        "Completed your first workout",
        "\U0001f4aa",
        _has_exercise,
    )
    PCOS_WARRIOR = AchievementDefinition(
        "PCOS Warrior",
        "Maintained high PCOS-friendly score",
        "\U0001f31f",
        _high_pcos_average,
    )
    CONSISTENCY_CHAMPION = AchievementDefinition(
        "Consistency Champion",
        "Logged meals for all meal times",
        "\U0001f3c6",
        _all_slots_filled,
    )
