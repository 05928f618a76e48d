"""Supplement intake service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.clock import utc_today
from fitness_tracker.domain.logs import SupplementLog
from fitness_tracker.errors import NotFoundError, ValidationError


class SupplementRepository(Protocol):
    """Persistence interface for supplement logs."""

    def create_log(self, log: SupplementLog) -> SupplementLog:
        """Insert a supplement log."""

    def list_logs(self, user_id: UUID, day: date) -> list[SupplementLog]:
        """Return a day's supplement logs."""

    def delete_log(self, user_id: UUID, log_id: int) -> bool:
        """Delete a log; return False when nothing matched."""


@dataclass
class SupplementService:
    """Service for supplement logs."""

    repository: SupplementRepository
    clock: Callable[[], date] = field(default=utc_today)

    def log_supplement(
        self,
        user_id: UUID,
        name: str | None,
        time_taken: str | None,
        dosage: str | None = None,
    ) -> SupplementLog:
        """Record a supplement taken today."""
        if not name or not time_taken:
            raise ValidationError("Supplement name and time are required")
        return self.repository.create_log(
            SupplementLog(
                id=None,
                user_id=user_id,
                name=name,
                dosage=dosage or None,
                time_taken=time_taken,
                date=self.clock(),
            )
        )

    def list_day(self, user_id: UUID, day: date | None = None) -> list[SupplementLog]:
        """Return supplements taken on a day, today by default."""
        return self.repository.list_logs(user_id, day or self.clock())

    def delete_log(self, user_id: UUID, log_id: int) -> None:
        """Delete one of the user's supplement logs."""
        if not self.repository.delete_log(user_id, log_id):
            raise NotFoundError("Supplement log not found")
