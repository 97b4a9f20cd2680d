"""Domain models for the food and exercise catalogs."""

from dataclasses import dataclass
from enum import Enum


class ExerciseType(str, Enum):
    """Exercise categories offered when logging a workout."""

    CARDIO = "Cardio"
    STRENGTH = "Strength"
    YOGA = "Yoga"
    HIIT = "HIIT"
    WALKING = "Walking"
    SWIMMING = "Swimming"


@dataclass(frozen=True)
class FoodCatalogItem:
    """Known food with its calories and PCOS-friendliness score."""

    name: str
    calories: int
    pcos_score: int


@dataclass(frozen=True)
class ExerciseCatalogItem:
    """Known exercise with its burn rate."""

    name: str
    type: ExerciseType
    calories_per_minute: int
