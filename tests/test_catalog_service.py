"""Tests for catalog lookups."""

from wellness_tracker.domain.catalog import ExerciseType
from wellness_tracker.services.catalog import CatalogService


def test_find_food_by_exact_name(catalog_service: CatalogService) -> None:
    food = catalog_service.find_food("Avocado Toast")

    assert food is not None
    assert food.calories == 280
    assert food.pcos_score == 8


def test_find_food_is_case_sensitive(catalog_service: CatalogService) -> None:
    assert catalog_service.find_food("avocado toast") is None
    assert catalog_service.find_food("") is None
    assert catalog_service.find_food(None) is None


def test_find_exercise_returns_type_and_rate(catalog_service: CatalogService) -> None:
    exercise = catalog_service.find_exercise("Running")

    assert exercise is not None
    assert exercise.type is ExerciseType.CARDIO
    assert exercise.calories_per_minute == 10
    assert catalog_service.find_exercise("Rowing") is None


def test_search_foods_is_case_insensitive(catalog_service: CatalogService) -> None:
    results = catalog_service.search_foods("SALAD")

    assert [food.name for food in results] == ["Quinoa Salad", "Mixed Green Salad"]


def test_search_foods_empty_term_returns_catalog(
    catalog_service: CatalogService,
) -> None:
    assert catalog_service.search_foods("") == catalog_service.list_foods()
    assert len(catalog_service.search_foods(None)) == 8
    assert catalog_service.search_foods("pizza") == []


def test_reference_tables_have_eight_rows(catalog_service: CatalogService) -> None:
    assert len(catalog_service.list_foods()) == 8
    assert len(catalog_service.list_exercises()) == 8
    scores = {food.pcos_score for food in catalog_service.list_foods()}
    assert all(0 <= score <= 10 for score in scores)
