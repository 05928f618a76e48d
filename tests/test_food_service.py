"""Tests for food logging."""

import pytest

from fitness_tracker.errors import NotFoundError, ValidationError
from fitness_tracker.services.food import (
    FoodService,
    find_quick_add_food,
    search_quick_add,
)
from tests.conftest import TODAY, InMemoryFoodRepository, fixed_today


def test_quick_add_uses_catalog_values(user_id) -> None:
    repository = InMemoryFoodRepository()
    service = FoodService(repository, clock=fixed_today)

    entry = service.quick_add(user_id, "Chicken Breast (100g)")

    assert entry.id is not None
    assert (entry.calories, entry.protein, entry.carbs, entry.fat) == (
        165,
        31,
        0,
        3.6,
    )
    assert entry.date == TODAY
    assert entry.user_id == user_id


def test_quick_add_rejects_unknown_food(user_id) -> None:
    repository = InMemoryFoodRepository()
    service = FoodService(repository, clock=fixed_today)

    with pytest.raises(ValidationError):
        service.quick_add(user_id, "Pizza")

    assert repository.entries == {}


def test_add_entry_requires_name_and_calories(user_id) -> None:
    repository = InMemoryFoodRepository()
    service = FoodService(repository, clock=fixed_today)

    with pytest.raises(ValidationError) as error:
        service.add_entry(user_id, name="  ", calories=100)
    with pytest.raises(ValidationError):
        service.add_entry(user_id, name="Toast", calories=None)

    assert error.value.message == "Food name and calories are required"
    assert repository.entries == {}


def test_add_entry_keeps_missing_macros(user_id) -> None:
    service = FoodService(InMemoryFoodRepository(), clock=fixed_today)

    entry = service.add_entry(user_id, name=" Toast ", calories=90)

    assert entry.name == "Toast"
    assert entry.protein is None


def test_summarize_day(user_id) -> None:
    service = FoodService(InMemoryFoodRepository(), clock=fixed_today)
    service.quick_add(user_id, "Chicken Breast (100g)")
    service.quick_add(user_id, "Brown Rice (100g)")

    summary, progress, count = service.summarize_day(user_id)

    assert count == 2
    assert summary.calories == 277
    assert summary.protein == pytest.approx(33.6)
    assert progress.calories == pytest.approx(277 / 2000 * 100)


def test_delete_entry_only_for_owner(user_id, other_user_id) -> None:
    service = FoodService(InMemoryFoodRepository(), clock=fixed_today)
    entry = service.quick_add(user_id, "Egg")

    with pytest.raises(NotFoundError):
        service.delete_entry(other_user_id, entry.id)

    service.delete_entry(user_id, entry.id)
    assert service.list_day(user_id) == []


def test_catalog_lookup_and_search() -> None:
    assert find_quick_add_food("banana") is not None
    assert find_quick_add_food("Bananas") is None
    assert [food.name for food in search_quick_add("rice")] == ["Brown Rice (100g)"]
    assert len(search_quick_add(None)) == 12
