"""Reminder service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.logs import REMINDER_TYPES, WEEKDAYS, Reminder
from fitness_tracker.errors import NotFoundError, ValidationError


class ReminderRepository(Protocol):
    """Persistence interface for reminders."""

    def create_reminder(self, reminder: Reminder) -> Reminder:
        """Insert a reminder."""

    def get_reminder(self, user_id: UUID, reminder_id: int) -> Reminder | None:
        """Return one of the user's reminders."""

    def list_reminders(self, user_id: UUID) -> list[Reminder]:
        """Return all reminders of a user."""

    def set_enabled(self, reminder_id: int, enabled: bool) -> None:
        """Enable or disable a reminder."""

    def delete_reminder(self, user_id: UUID, reminder_id: int) -> bool:
        """Delete a reminder; return False when nothing matched."""


@dataclass
class ReminderService:
    """Service for recurring reminders."""

    repository: ReminderRepository

    def create(  # noqa: PLR0913
        self,
        user_id: UUID,
        title: str | None,
        time: str | None,
        days: list[str],
        reminder_type: str = "workout",
        message: str | None = None,
        enabled: bool = True,
    ) -> Reminder:
        """Create a reminder for the given weekdays."""
        if not title or not time or not days:
            raise ValidationError("Title, time, and at least one day are required")
        if reminder_type not in REMINDER_TYPES:
            raise ValidationError(f"Unknown reminder type: {reminder_type}")
        unknown = [day for day in days if day not in WEEKDAYS]
        if unknown:
            raise ValidationError(f"Unknown weekdays: {', '.join(unknown)}")
        return self.repository.create_reminder(
            Reminder(
                id=None,
                user_id=user_id,
                type=reminder_type,
                title=title,
                message=message or None,
                time=time,
                days=sorted(set(days)),
                enabled=enabled,
            )
        )

    def list_reminders(self, user_id: UUID) -> list[Reminder]:
        """Return the user's reminders."""
        return self.repository.list_reminders(user_id)

    def toggle(self, user_id: UUID, reminder_id: int) -> Reminder:
        """Flip a reminder between enabled and disabled."""
        reminder = self.repository.get_reminder(user_id, reminder_id)
        if reminder is None:
            raise NotFoundError("Reminder not found")
        self.repository.set_enabled(reminder_id, not reminder.enabled)
        return Reminder(
            id=reminder.id,
            user_id=reminder.user_id,
            type=reminder.type,
            title=reminder.title,
            message=reminder.message,
            time=reminder.time,
            days=reminder.days,
            enabled=not reminder.enabled,
        )

    def delete(self, user_id: UUID, reminder_id: int) -> None:
        """Delete one of the user's reminders."""
        if not self.repository.delete_reminder(user_id, reminder_id):
            raise NotFoundError("Reminder not found")
