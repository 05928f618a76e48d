"""Supabase repository for wellness check-ins."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.logs import WellnessLog
from fitness_tracker.errors import StoreOperationError
from fitness_tracker.services.wellness import WellnessRepository


@dataclass
class SupabaseWellnessRepository(WellnessRepository):
    """Supabase implementation for wellness check-ins."""

    client: Client

    def create_log(self, log: WellnessLog) -> WellnessLog:
        """Insert a check-in row."""
        response = (
            self.client.table("wellness_logs")
            .insert(
                {
                    "user_id": str(log.user_id),
                    "sleep_hours": log.sleep_hours,
                    "sleep_quality": log.sleep_quality,
                    "mood": log.mood,
                    "energy": log.energy,
                    "notes": log.notes,
                    "date": log.date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to save check-in")
        return _parse_log(response.data[0])

    def latest_log(self, user_id: UUID) -> WellnessLog | None:
        """Return the newest check-in."""
        response = (
            self.client.table("wellness_logs")
            .select("*")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .order("id", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])


def _parse_log(row: dict[str, object]) -> WellnessLog:
    sleep_hours = row.get("sleep_hours")
    sleep_quality = row.get("sleep_quality")
    return WellnessLog(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        sleep_hours=float(sleep_hours) if sleep_hours is not None else None,
        sleep_quality=int(sleep_quality) if sleep_quality is not None else None,
        mood=int(row.get("mood", 3)),
        energy=int(row.get("energy", 3)),
        notes=row.get("notes"),
        date=date.fromisoformat(str(row["date"])),
    )
