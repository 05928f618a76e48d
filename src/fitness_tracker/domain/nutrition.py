"""Nutrition domain models."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class FoodEntry:
    """A logged food item for one day."""

    id: int | None
    user_id: UUID
    name: str
    calories: int
    protein: float | None
    carbs: float | None
    fat: float | None
    date: date


@dataclass(frozen=True)
class MacroSummary:
    """Total calories and macros (grams)."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MacroProgress:
    """Percent of each daily goal reached."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class QuickAddFood:
    """Catalog food with fixed nutritional values."""

    name: str
    calories: int
    protein: float
    carbs: float
    fat: float


DEFAULT_GOALS = MacroSummary(calories=2000, protein=150, carbs=200, fat=65)

QUICK_ADD_FOODS: tuple[QuickAddFood, ...] = (
    QuickAddFood("Chicken Breast (100g)", 165, 31, 0, 3.6),
    QuickAddFood("Brown Rice (100g)", 112, 2.6, 24, 0.8),
    QuickAddFood("Egg", 78, 6.3, 0.6, 5.3),
    QuickAddFood("Whey Protein (1 scoop)", 120, 24, 3, 1.5),
    QuickAddFood("Banana", 105, 1.3, 27, 0.4),
    QuickAddFood("Oatmeal (100g)", 389, 16.9, 66.3, 6.9),
    QuickAddFood("Greek Yogurt (100g)", 59, 10, 3.6, 0.4),
    QuickAddFood("Salmon (100g)", 208, 20, 0, 13),
    QuickAddFood("Broccoli (100g)", 34, 2.8, 6.6, 0.4),
    QuickAddFood("Almonds (28g)", 164, 6, 6, 14),
    QuickAddFood("Avocado (100g)", 160, 2, 8.5, 14.7),
    QuickAddFood("Sweet Potato (100g)", 86, 1.6, 20.1, 0.1),
)
