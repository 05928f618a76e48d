"""Supabase repository for weight logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.profile import WeightLog
from fitness_tracker.errors import StoreOperationError
from fitness_tracker.services.weight import WeightLogRepository


@dataclass
class SupabaseWeightLogRepository(WeightLogRepository):
    """Supabase implementation for weight logs."""

    client: Client

    def create_log(self, log: WeightLog) -> WeightLog:
        """Insert a weight log row."""
        response = (
            self.client.table("weight_logs")
            .insert(
                {
                    "user_id": str(log.user_id),
                    "weight": log.weight,
                    "body_fat_percentage": log.body_fat_percentage,
                    "date": log.date.isoformat(),
                    "notes": log.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to log weight")
        return _parse_log(response.data[0])

    def list_logs(self, user_id: UUID, limit: int) -> list[WeightLog]:
        """Return recent weight logs."""
        response = (
            self.client.table("weight_logs")
            .select("id, user_id, weight, body_fat_percentage, date, notes")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .order("id", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def delete_log(self, user_id: UUID, log_id: int) -> bool:
        """Delete a weight log owned by the user."""
        response = (
            self.client.table("weight_logs")
            .delete()
            .eq("id", log_id)
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_log(row: dict[str, object]) -> WeightLog:
    body_fat = row.get("body_fat_percentage")
    return WeightLog(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        weight=float(row.get("weight", 0.0)),
        body_fat_percentage=float(body_fat) if body_fat is not None else None,
        date=date.fromisoformat(str(row["date"])),
        notes=row.get("notes"),
    )
