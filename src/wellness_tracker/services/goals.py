"""Weekly goal progress.

Current values come from the single tracked day; there is no multi-day
history to accumulate.
"""

from dataclasses import dataclass

from wellness_tracker.domain.sessions import DaySession
from wellness_tracker.domain.stats import DailyAggregate, WeeklyGoals
from wellness_tracker.services.stats import progress, round_half_up

WEEKLY_MEALS_TARGET = 21
WEEKLY_EXERCISE_HOURS_TARGET = 5
PCOS_SCORE_TARGET = 8
MINUTES_PER_HOUR = 60


@dataclass
class GoalService:
    """Compare today's totals with the weekly targets."""

    def weekly_goals(
        self, aggregate: DailyAggregate, session: DaySession
    ) -> WeeklyGoals:
        """Return clamped progress for meals, exercise hours and PCOS score."""
        hours = round_half_up(aggregate.total_exercise_minutes / MINUTES_PER_HOUR)
        return WeeklyGoals(
            meals=progress(len(session.meals), WEEKLY_MEALS_TARGET),
            exercise_hours=progress(hours, WEEKLY_EXERCISE_HOURS_TARGET),
            pcos_score=progress(aggregate.average_pcos_score, PCOS_SCORE_TARGET),
        )
