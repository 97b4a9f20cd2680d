"""Builders for meal and exercise entries."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from wellness_tracker.domain.catalog import ExerciseType
from wellness_tracker.domain.entries import ExerciseEntry, MealEntry, MealSlot
from wellness_tracker.services.catalog import CatalogService

_logger = logging.getLogger(__name__)

DEFAULT_PCOS_SCORE = 7
DEFAULT_CALORIES_PER_MINUTE = 5
DEFAULT_EXERCISE_TYPE = ExerciseType.CARDIO.value
DEFAULT_TIME_FORMAT = "%I:%M %p"

_LEADING_INT = re.compile(r"\s*\+?([0-9]+)")


@dataclass
class EntryBuilder:
    """Turn catalog selections or custom input into log entries.

    Building only reads the catalog and the clock. Appending the result to a
    session is the caller's job.
    """

    catalog: CatalogService
    time_format: str = DEFAULT_TIME_FORMAT
    clock: Callable[[], datetime] = field(default=datetime.now)
    id_factory: Callable[[], UUID] = field(default=uuid4)

    def build_meal(
        self,
        meal_slot: MealSlot | str,
        catalog_name: str | None,
        custom_name: str | None,
        custom_calories_text: str | None,
    ) -> MealEntry:
        """Build a meal entry from a catalog food or custom input."""
        slot = MealSlot(meal_slot)
        food = self.catalog.find_food(catalog_name)
        if food is not None:
            name, calories, pcos_score = food.name, food.calories, food.pcos_score
        else:
            name = custom_name or ""
            calories = parse_int(custom_calories_text)
            pcos_score = DEFAULT_PCOS_SCORE
        entry = MealEntry(
            id=self.id_factory(),
            meal_slot=slot,
            name=name,
            calories=calories,
            logged_at_time=self._now_text(),
            pcos_score=pcos_score,
        )
        _logger.info(
            "Built meal entry: slot=%s name=%s calories=%s catalog=%s",
            slot.value,
            name,
            calories,
            food is not None,
        )
        return entry

    def build_exercise(
        self,
        catalog_name: str | None,
        custom_name: str | None,
        custom_type: ExerciseType | str | None,
        duration_text: str | None,
    ) -> ExerciseEntry:
        """Build an exercise entry from a catalog exercise or custom input."""
        duration = parse_int(duration_text)
        exercise = self.catalog.find_exercise(catalog_name)
        if exercise is not None:
            calories = exercise.calories_per_minute * duration
            exercise_type = exercise.type.value
        else:
            calories = duration * DEFAULT_CALORIES_PER_MINUTE
            exercise_type = _type_name(custom_type)
        entry = ExerciseEntry(
            id=self.id_factory(),
            name=catalog_name or custom_name or "",
            duration_minutes=duration,
            calories=calories,
            type=exercise_type,
            logged_at_time=self._now_text(),
        )
        _logger.info(
            "Built exercise entry: name=%s minutes=%s calories=%s",
            entry.name,
            duration,
            calories,
        )
        return entry

    def can_submit_meal(
        self, catalog_name: str | None, custom_name: str | None
    ) -> bool:
        """Return whether a meal submission names a food."""
        return self.catalog.find_food(catalog_name) is not None or _is_usable(
            custom_name
        )

    def can_submit_exercise(
        self, catalog_name: str | None, custom_name: str | None
    ) -> bool:
        """Return whether an exercise submission names an exercise."""
        return bool(catalog_name) or _is_usable(custom_name)

    def _now_text(self) -> str:
        return self.clock().strftime(self.time_format)


def parse_int(value: object) -> int:
    """Parse leading digits from user text, defaulting to zero."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if not isinstance(value, str):
        return 0
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        return 0


def _type_name(value: ExerciseType | str | None) -> str:
    if isinstance(value, ExerciseType):
        return value.value
    return value or DEFAULT_EXERCISE_TYPE


def _is_usable(name: str | None) -> bool:
    return bool(name and name.strip())
