"""Supabase repository for supplement logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.logs import SupplementLog
from fitness_tracker.errors import StoreOperationError
from fitness_tracker.services.supplements import SupplementRepository


@dataclass
class SupabaseSupplementRepository(SupplementRepository):
    """Supabase implementation for supplement logs."""

    client: Client

    def create_log(self, log: SupplementLog) -> SupplementLog:
        """Insert a supplement log row."""
        response = (
            self.client.table("supplement_logs")
            .insert(
                {
                    "user_id": str(log.user_id),
                    "name": log.name,
                    "dosage": log.dosage,
                    "time_taken": log.time_taken,
                    "date": log.date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to log supplement")
        return _parse_log(response.data[0])

    def list_logs(self, user_id: UUID, day: date) -> list[SupplementLog]:
        """Return the supplements logged on a day."""
        response = (
            self.client.table("supplement_logs")
            .select("id, user_id, name, dosage, time_taken, date")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("time_taken", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def delete_log(self, user_id: UUID, log_id: int) -> bool:
        """Delete a supplement log owned by the user."""
        response = (
            self.client.table("supplement_logs")
            .delete()
            .eq("id", log_id)
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_log(row: dict[str, object]) -> SupplementLog:
    return SupplementLog(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        dosage=row.get("dosage"),
        time_taken=str(row.get("time_taken", "")),
        date=date.fromisoformat(str(row["date"])),
    )
