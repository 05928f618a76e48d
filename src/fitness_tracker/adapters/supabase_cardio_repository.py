"""Supabase repository for cardio logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.logs import CardioLog
from fitness_tracker.errors import StoreOperationError
from fitness_tracker.services.cardio import CardioRepository


@dataclass
class SupabaseCardioRepository(CardioRepository):
    """Supabase implementation for cardio logs."""

    client: Client

    def create_log(self, log: CardioLog) -> CardioLog:
        """Insert a cardio log row."""
        response = (
            self.client.table("cardio_logs")
            .insert(
                {
                    "user_id": str(log.user_id),
                    "type": log.type,
                    "duration": log.duration,
                    "distance": log.distance,
                    "calories_burned": log.calories_burned,
                    "date": log.date.isoformat(),
                    "notes": log.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to log cardio session")
        return _parse_log(response.data[0])

    def list_logs(self, user_id: UUID, limit: int) -> list[CardioLog]:
        """Return recent cardio logs."""
        response = (
            self.client.table("cardio_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .order("id", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def delete_log(self, user_id: UUID, log_id: int) -> bool:
        """Delete a cardio log owned by the user."""
        response = (
            self.client.table("cardio_logs")
            .delete()
            .eq("id", log_id)
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_log(row: dict[str, object]) -> CardioLog:
    distance = row.get("distance")
    calories = row.get("calories_burned")
    return CardioLog(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        type=str(row.get("type", "other")),
        duration=int(row.get("duration", 0)),
        distance=float(distance) if distance is not None else None,
        calories_burned=int(calories) if calories is not None else None,
        date=date.fromisoformat(str(row["date"])),
        notes=row.get("notes"),
    )
