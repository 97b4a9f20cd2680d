"""Domain models for the day's session state."""

from dataclasses import dataclass, field

from wellness_tracker.domain.entries import ExerciseEntry, MealEntry, MoodSample

DEFAULT_MOOD = 3
DEFAULT_ENERGY = 3


@dataclass(frozen=True)
class DaySession:
    """Everything logged for the current day."""

    meals: tuple[MealEntry, ...] = ()
    exercises: tuple[ExerciseEntry, ...] = ()
    mood: MoodSample = field(
        default_factory=lambda: MoodSample(mood=DEFAULT_MOOD, energy=DEFAULT_ENERGY)
    )
