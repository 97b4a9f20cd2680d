"""Domain models for logged entries."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class MealSlot(str, Enum):
    """Meal times tracked for a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


@dataclass(frozen=True)
class MealEntry:
    """A meal logged into a slot."""

    id: UUID
    meal_slot: MealSlot
    name: str
    calories: int
    logged_at_time: str
    pcos_score: int


@dataclass(frozen=True)
class ExerciseEntry:
    """A logged workout."""

    id: UUID
    name: str
    duration_minutes: int
    calories: int
    type: str
    logged_at_time: str


@dataclass(frozen=True)
class MoodSample:
    """Mood and energy ratings on a 1-5 scale."""

    mood: int | None = None
    energy: int | None = None
