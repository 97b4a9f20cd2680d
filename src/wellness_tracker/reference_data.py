"""Static catalog tables (single source of truth for known foods and exercises)."""

from wellness_tracker.domain.catalog import (
    ExerciseCatalogItem,
    ExerciseType,
    FoodCatalogItem,
)

COMMON_FOODS: tuple[FoodCatalogItem, ...] = (
    FoodCatalogItem("Greek Yogurt with Berries", calories=150, pcos_score=9),
    FoodCatalogItem("Avocado Toast", calories=280, pcos_score=8),
    FoodCatalogItem("Quinoa Salad", calories=320, pcos_score=9),
    FoodCatalogItem("Grilled Chicken Breast", calories=185, pcos_score=8),
    FoodCatalogItem("Salmon with Vegetables", calories=350, pcos_score=10),
    FoodCatalogItem("Oatmeal with Nuts", calories=220, pcos_score=8),
    FoodCatalogItem("Sweet Potato", calories=112, pcos_score=9),
    FoodCatalogItem("Mixed Green Salad", calories=80, pcos_score=9),
)

COMMON_EXERCISES: tuple[ExerciseCatalogItem, ...] = (
    ExerciseCatalogItem("Brisk Walking", ExerciseType.WALKING, calories_per_minute=4),
    ExerciseCatalogItem("Running", ExerciseType.CARDIO, calories_per_minute=10),
    ExerciseCatalogItem("Yoga Flow", ExerciseType.YOGA, calories_per_minute=3),
    ExerciseCatalogItem(
        "Weight Training", ExerciseType.STRENGTH, calories_per_minute=6
    ),
    ExerciseCatalogItem("HIIT Workout", ExerciseType.HIIT, calories_per_minute=12),
    ExerciseCatalogItem("Swimming", ExerciseType.SWIMMING, calories_per_minute=8),
    ExerciseCatalogItem("Cycling", ExerciseType.CARDIO, calories_per_minute=7),
    ExerciseCatalogItem("Pilates", ExerciseType.STRENGTH, calories_per_minute=4),
)
