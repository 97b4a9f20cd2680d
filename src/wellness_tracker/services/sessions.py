"""Session operations for logging a day."""

import logging
from dataclasses import dataclass, replace

from wellness_tracker.domain.catalog import ExerciseType
from wellness_tracker.domain.entries import ExerciseEntry, MealEntry, MealSlot
from wellness_tracker.domain.sessions import DaySession
from wellness_tracker.domain.stats import DailyAggregate, DailyProgress, WeeklyGoals
from wellness_tracker.services.achievements import (
    AchievementService,
    AchievementStatus,
)
from wellness_tracker.services.entries import EntryBuilder
from wellness_tracker.services.goals import GoalService
from wellness_tracker.services.stats import StatsService

_logger = logging.getLogger(__name__)

RATING_MIN = 1
RATING_MAX = 5


class InvalidSubmissionError(ValueError):
    """Raised when a caller submits input it should have blocked."""


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the presentation layer reads for one render."""

    session: DaySession
    aggregate: DailyAggregate
    daily_progress: DailyProgress
    achievements: list[AchievementStatus]
    weekly_goals: WeeklyGoals


@dataclass
class SessionService:
    """Apply user actions to a session and derive display values.

    Sessions are immutable. Every write returns a new session and leaves the
    one passed in untouched.
    """

    entry_builder: EntryBuilder
    stats_service: StatsService
    achievement_service: AchievementService
    goal_service: GoalService

    def new_session(self) -> DaySession:
        """Return an empty session with neutral mood and energy."""
        return DaySession()

    def reset(self, session: DaySession) -> DaySession:
        """Start over with no entries and neutral ratings."""
        _logger.info(
            "Session reset: meals=%s exercises=%s",
            len(session.meals),
            len(session.exercises),
        )
        return self.new_session()

    def submit_meal(
        self,
        session: DaySession,
        meal_slot: MealSlot | str,
        catalog_name: str | None,
        custom_name: str | None,
        custom_calories_text: str | None,
    ) -> DaySession:
        """Build a meal entry and append it to the session."""
        if not self.entry_builder.can_submit_meal(catalog_name, custom_name):
            _logger.warning("Rejected meal submission without a food name")
            raise InvalidSubmissionError("Select a food or enter a custom name")
        entry = self.entry_builder.build_meal(
            meal_slot, catalog_name, custom_name, custom_calories_text
        )
        return replace(session, meals=(*session.meals, entry))

    def submit_exercise(
        self,
        session: DaySession,
        catalog_name: str | None,
        custom_name: str | None,
        custom_type: ExerciseType | str | None,
        duration_text: str | None,
    ) -> DaySession:
        """Build an exercise entry and append it to the session."""
        if not self.entry_builder.can_submit_exercise(catalog_name, custom_name):
            _logger.warning("Rejected exercise submission without a name")
            raise InvalidSubmissionError("Select an exercise or enter a custom name")
        entry = self.entry_builder.build_exercise(
            catalog_name, custom_name, custom_type, duration_text
        )
        return replace(session, exercises=(*session.exercises, entry))

    def set_mood(self, session: DaySession, value: int) -> DaySession:
        """Overwrite the mood rating."""
        _validate_rating("mood", value)
        return replace(session, mood=replace(session.mood, mood=value))

    def set_energy(self, session: DaySession, value: int) -> DaySession:
        """Overwrite the energy rating."""
        _validate_rating("energy", value)
        return replace(session, mood=replace(session.mood, energy=value))

    def meals(self, session: DaySession) -> tuple[MealEntry, ...]:
        return session.meals

    def exercises(self, session: DaySession) -> tuple[ExerciseEntry, ...]:
        return session.exercises

    def meal_for_slot(
        self, session: DaySession, slot: MealSlot | str
    ) -> MealEntry | None:
        """Return the first meal logged in a slot, if any."""
        wanted = MealSlot(slot)
        for meal in session.meals:
            if meal.meal_slot == wanted:
                return meal
        return None

    def aggregate(self, session: DaySession) -> DailyAggregate:
        return self.stats_service.aggregate(session.meals, session.exercises)

    def daily_progress(self, session: DaySession) -> DailyProgress:
        return self.stats_service.daily_progress(self.aggregate(session))

    def achievements(self, session: DaySession) -> list[AchievementStatus]:
        return self.achievement_service.evaluate(self.aggregate(session), session)

    def weekly_goals(self, session: DaySession) -> WeeklyGoals:
        return self.goal_service.weekly_goals(self.aggregate(session), session)

    def snapshot(self, session: DaySession) -> DashboardSnapshot:
        """Compute every derived value for the session in one pass."""
        aggregate = self.aggregate(session)
        return DashboardSnapshot(
            session=session,
            aggregate=aggregate,
            daily_progress=self.stats_service.daily_progress(aggregate),
            achievements=self.achievement_service.evaluate(aggregate, session),
            weekly_goals=self.goal_service.weekly_goals(aggregate, session),
        )


def _validate_rating(field_name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        _logger.warning("Rejected %s rating: value=%r", field_name, value)
        raise InvalidSubmissionError(f"{field_name} must be an integer")
    if not RATING_MIN <= value <= RATING_MAX:
        _logger.warning("Rejected %s rating: value=%r", field_name, value)
        raise InvalidSubmissionError(
            f"{field_name} must be between {RATING_MIN} and {RATING_MAX}"
        )
