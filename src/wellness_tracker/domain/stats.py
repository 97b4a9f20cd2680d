"""Domain models for derived statistics."""

from dataclasses import dataclass

from wellness_tracker.domain.entries import MealSlot


@dataclass(frozen=True)
class DailyAggregate:
    """Summary metrics folded from a day's entries."""

    meal_slots_filled: frozenset[MealSlot]
    meals_logged_count: int
    total_exercise_minutes: int
    pcos_friendly_meal_count: int
    total_calories_consumed: int
    total_calories_burned: int
    net_calories: int
    average_pcos_score: int


@dataclass(frozen=True)
class GoalProgress:
    """Current value against a target, with a ratio clamped to 1.0."""

    current: int
    target: int
    ratio: float

    @property
    def percent(self) -> float:
        """Return the clamped ratio as a percentage."""
        return self.ratio * 100


@dataclass(frozen=True)
class DailyProgress:
    """Progress bars for today's dashboard."""

    meals: GoalProgress
    exercise_minutes: GoalProgress
    pcos_friendly_meals: GoalProgress


@dataclass(frozen=True)
class WeeklyGoals:
    """Progress toward the weekly targets."""

    meals: GoalProgress
    exercise_hours: GoalProgress
    pcos_score: GoalProgress
