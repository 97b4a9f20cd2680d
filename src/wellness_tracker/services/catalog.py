"""Lookup services for the food and exercise catalogs."""

from dataclasses import dataclass

from wellness_tracker.domain.catalog import ExerciseCatalogItem, FoodCatalogItem
from wellness_tracker.reference_data import COMMON_EXERCISES, COMMON_FOODS


@dataclass
class CatalogService:
    """Read-only access to the known foods and exercises."""

    foods: tuple[FoodCatalogItem, ...] = COMMON_FOODS
    exercises: tuple[ExerciseCatalogItem, ...] = COMMON_EXERCISES

    def find_food(self, name: str | None) -> FoodCatalogItem | None:
        """Return the food with exactly this name, if present."""
        if not name:
            return None
        for food in self.foods:
            if food.name == name:
                return food
        return None

    def find_exercise(self, name: str | None) -> ExerciseCatalogItem | None:
        """Return the exercise with exactly this name, if present."""
        if not name:
            return None
        for exercise in self.exercises:
            if exercise.name == name:
                return exercise
        return None

    def search_foods(self, term: str | None) -> list[FoodCatalogItem]:
        """Filter foods by case-insensitive substring, keeping catalog order."""
        if not term:
            return self.list_foods()
        needle = term.lower()
        return [food for food in self.foods if needle in food.name.lower()]

    def list_foods(self) -> list[FoodCatalogItem]:
        """Return all foods."""
        return list(self.foods)

    def list_exercises(self) -> list[ExerciseCatalogItem]:
        """Return all exercises."""
        return list(self.exercises)
