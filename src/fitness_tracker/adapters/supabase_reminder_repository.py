"""Supabase repository for reminders."""

import json
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.logs import Reminder
from fitness_tracker.errors import StoreOperationError
from fitness_tracker.services.reminders import ReminderRepository


@dataclass
class SupabaseReminderRepository(ReminderRepository):
    """Supabase implementation for reminders."""

    client: Client

    def create_reminder(self, reminder: Reminder) -> Reminder:
        """Insert a reminder row; weekdays are stored as JSON text."""
        response = (
            self.client.table("reminders")
            .insert(
                {
                    "user_id": str(reminder.user_id),
                    "type": reminder.type,
                    "title": reminder.title,
                    "message": reminder.message,
                    "time": reminder.time,
                    "days": json.dumps(reminder.days),
                    "enabled": reminder.enabled,
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to create reminder")
        return _parse_reminder(response.data[0])

    def get_reminder(self, user_id: UUID, reminder_id: int) -> Reminder | None:
        """Return one of the user's reminders."""
        response = (
            self.client.table("reminders")
            .select("*")
            .eq("id", reminder_id)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_reminder(response.data[0])

    def list_reminders(self, user_id: UUID) -> list[Reminder]:
        """Return reminders ordered by time of day."""
        response = (
            self.client.table("reminders")
            .select("*")
            .eq("user_id", str(user_id))
            .order("time", desc=False)
            .execute()
        )
        return [_parse_reminder(row) for row in response.data or []]

    def set_enabled(self, reminder_id: int, enabled: bool) -> None:
        """Update the enabled flag."""
        self.client.table("reminders").update({"enabled": enabled}).eq(
            "id", reminder_id
        ).execute()

    def delete_reminder(self, user_id: UUID, reminder_id: int) -> bool:
        """Delete a reminder owned by the user."""
        response = (
            self.client.table("reminders")
            .delete()
            .eq("id", reminder_id)
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_reminder(row: dict[str, object]) -> Reminder:
    days_raw = row.get("days") or "[]"
    days = json.loads(days_raw) if isinstance(days_raw, str) else days_raw
    return Reminder(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        type=str(row.get("type", "other")),
        title=str(row.get("title", "")),
        message=row.get("message"),
        time=str(row.get("time", "")),
        days=[str(day) for day in days],
        enabled=bool(row.get("enabled", True)),
    )
