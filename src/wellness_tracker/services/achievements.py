"""Achievement evaluation."""

from dataclasses import dataclass

from wellness_tracker.achievements import Achievement
from wellness_tracker.domain.sessions import DaySession
from wellness_tracker.domain.stats import DailyAggregate


@dataclass(frozen=True)
class AchievementStatus:
    """An achievement and whether today's data earns it."""

    achievement: Achievement
    earned: bool

    @property
    def title(self) -> str:
        return self.achievement.value.title

    @property
    def description(self) -> str:
        return self.achievement.value.description

    @property
    def icon(self) -> str:
        return self.achievement.value.icon


@dataclass
class AchievementService:
    """Evaluate badges from scratch on every call."""

    def evaluate(
        self, aggregate: DailyAggregate, session: DaySession
    ) -> list[AchievementStatus]:
        """Return every achievement in display order with its earned flag."""
        return [
            AchievementStatus(
                achievement=achievement,
                earned=achievement.value.predicate(aggregate, session),
            )
            for achievement in Achievement
        ]

    @staticmethod
    def earned_count(statuses: list[AchievementStatus]) -> int:
        """Return how many achievements are earned."""
        return sum(1 for status in statuses if status.earned)
