"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.nutrition import FoodEntry
from fitness_tracker.errors import StoreOperationError
from fitness_tracker.services.food import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food entries."""

    client: Client

    def create_entry(self, entry: FoodEntry) -> FoodEntry:
        """Insert a food entry row."""
        response = (
            self.client.table("food_entries")
            .insert(
                {
                    "user_id": str(entry.user_id),
                    "name": entry.name,
                    "calories": entry.calories,
                    "protein": entry.protein,
                    "carbs": entry.carbs,
                    "fat": entry.fat,
                    "date": entry.date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to add food entry")
        return _parse_entry(response.data[0])

    def list_entries(self, user_id: UUID, day: date) -> list[FoodEntry]:
        """Return a day's food entries."""
        response = (
            self.client.table("food_entries")
            .select("id, user_id, name, calories, protein, carbs, fat, date")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("id", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def delete_entry(self, user_id: UUID, entry_id: int) -> bool:
        """Delete a food entry owned by the user."""
        response = (
            self.client.table("food_entries")
            .delete()
            .eq("id", entry_id)
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        calories=int(row.get("calories") or 0),
        protein=_optional_float(row.get("protein")),
        carbs=_optional_float(row.get("carbs")),
        fat=_optional_float(row.get("fat")),
        date=date.fromisoformat(str(row["date"])),
    )


def _optional_float(value: object) -> float | None:
    return float(value) if value is not None else None
