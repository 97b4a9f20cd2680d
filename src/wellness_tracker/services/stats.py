"""Statistics service for a day's entries."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from wellness_tracker.domain.entries import ExerciseEntry, MealEntry, MealSlot
from wellness_tracker.domain.stats import DailyAggregate, DailyProgress, GoalProgress

PCOS_FRIENDLY_SCORE = 8
DAILY_MEAL_TARGET = len(MealSlot)
DAILY_EXERCISE_MINUTES_TARGET = 30
DAILY_PCOS_FRIENDLY_TARGET = 1


@dataclass
class StatsService:
    """Service for folding entries into daily metrics."""

    def aggregate(
        self, meals: Sequence[MealEntry], exercises: Sequence[ExerciseEntry]
    ) -> DailyAggregate:
        """Return summary metrics for the given entries."""
        slots: set[MealSlot] = set()
        consumed = 0
        pcos_total = 0
        pcos_friendly = 0
        for meal in meals:
            slots.add(meal.meal_slot)
            consumed += meal.calories
            pcos_total += meal.pcos_score
            if meal.pcos_score >= PCOS_FRIENDLY_SCORE:
                pcos_friendly += 1

        minutes = 0
        burned = 0
        for exercise in exercises:
            minutes += exercise.duration_minutes
            burned += exercise.calories

        average = round_half_up(pcos_total / len(meals)) if meals else 0
        return DailyAggregate(
            meal_slots_filled=frozenset(slots),
            meals_logged_count=len(slots),
            total_exercise_minutes=minutes,
            pcos_friendly_meal_count=pcos_friendly,
            total_calories_consumed=consumed,
            total_calories_burned=burned,
            net_calories=consumed - burned,
            average_pcos_score=average,
        )

    def daily_progress(self, aggregate: DailyAggregate) -> DailyProgress:
        """Return today's dashboard progress against the daily targets."""
        return DailyProgress(
            meals=progress(aggregate.meals_logged_count, DAILY_MEAL_TARGET),
            exercise_minutes=progress(
                aggregate.total_exercise_minutes, DAILY_EXERCISE_MINUTES_TARGET
            ),
            pcos_friendly_meals=progress(
                aggregate.pcos_friendly_meal_count, DAILY_PCOS_FRIENDLY_TARGET
            ),
        )


def progress(current: int, target: int) -> GoalProgress:
    """Build a progress triple with the ratio clamped to 1.0."""
    ratio = min(current / target, 1.0) if target > 0 else 1.0
    return GoalProgress(current=current, target=target, ratio=ratio)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)
