"""Food logging service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.clock import utc_today
from fitness_tracker.domain.nutrition import (
    DEFAULT_GOALS,
    QUICK_ADD_FOODS,
    FoodEntry,
    MacroProgress,
    MacroSummary,
    QuickAddFood,
)
from fitness_tracker.errors import NotFoundError, ValidationError
from fitness_tracker.services.metrics import macro_progress, summarize_macros


class FoodRepository(Protocol):
    """Persistence interface for food entries."""

    def create_entry(self, entry: FoodEntry) -> FoodEntry:
        """Insert a food entry and return the stored row."""

    def list_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return a user's entries for one day."""

    def delete_entry(self, user_id: UUID, entry_id: int) -> bool:
        """Delete an entry; return False when nothing matched."""


@dataclass
class FoodService:
    """Application service for food entries and daily nutrition."""

    repository: FoodRepository
    clock: Callable[[], date] = field(default=utc_today)

    def add_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str | None,
        calories: int | None,
        protein: float | None = None,
        carbs: float | None = None,
        fat: float | None = None,
    ) -> FoodEntry:
        """Log a manually entered food for today."""
        if not name or not name.strip() or calories is None:
            raise ValidationError("Food name and calories are required")
        entry = FoodEntry(
            id=None,
            user_id=user_id,
            name=name.strip(),
            calories=int(calories),
            protein=protein,
            carbs=carbs,
            fat=fat,
            date=self.clock(),
        )
        return self.repository.create_entry(entry)

    def quick_add(self, user_id: UUID, food_name: str) -> FoodEntry:
        """Log a catalog food with its fixed macros for today."""
        food = find_quick_add_food(food_name)
        if food is None:
            raise ValidationError(f"Unknown quick-add food: {food_name}")
        entry = FoodEntry(
            id=None,
            user_id=user_id,
            name=food.name,
            calories=food.calories,
            protein=food.protein,
            carbs=food.carbs,
            fat=food.fat,
            date=self.clock(),
        )
        return self.repository.create_entry(entry)

    def list_day(self, user_id: UUID, day: date | None = None) -> list[FoodEntry]:
        """Return entries for a day, today by default."""
        return self.repository.list_entries(user_id, day or self.clock())

    def delete_entry(self, user_id: UUID, entry_id: int) -> None:
        """Delete one of the user's entries."""
        if not self.repository.delete_entry(user_id, entry_id):
            raise NotFoundError("Food entry not found")

    def summarize_day(
        self, user_id: UUID, day: date | None = None
    ) -> tuple[MacroSummary, MacroProgress, int]:
        """Return totals, goal progress and entry count for a day."""
        entries = self.list_day(user_id, day)
        summary = summarize_macros(entries)
        return summary, macro_progress(summary, DEFAULT_GOALS), len(entries)


def find_quick_add_food(name: str) -> QuickAddFood | None:
    """Return the catalog food with this exact name (case-insensitive)."""
    wanted = name.strip().lower()
    for food in QUICK_ADD_FOODS:
        if food.name.lower() == wanted:
            return food
    return None


def search_quick_add(term: str | None) -> list[QuickAddFood]:
    """Filter the catalog by a case-insensitive substring."""
    if not term:
        return list(QUICK_ADD_FOODS)
    needle = term.strip().lower()
    return [food for food in QUICK_ADD_FOODS if needle in food.name.lower()]
