"""Body-weight log service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.clock import utc_today
from fitness_tracker.domain.profile import WeightLog
from fitness_tracker.errors import NotFoundError, ValidationError


class WeightLogRepository(Protocol):
    """Persistence interface for weight logs."""

    def create_log(self, log: WeightLog) -> WeightLog:
        """Insert a weight log."""

    def list_logs(self, user_id: UUID, limit: int) -> list[WeightLog]:
        """Return weight logs, newest first."""

    def delete_log(self, user_id: UUID, log_id: int) -> bool:
        """Delete a log; return False when nothing matched."""


@dataclass
class WeightLogService:
    """Service for body-weight history."""

    repository: WeightLogRepository
    clock: Callable[[], date] = field(default=utc_today)

    def log_weight(
        self,
        user_id: UUID,
        weight: float | None,
        body_fat_percentage: float | None = None,
        notes: str | None = None,
    ) -> WeightLog:
        """Record today's weight."""
        if weight is None or weight <= 0:
            raise ValidationError("Weight is required")
        return self.repository.create_log(
            WeightLog(
                id=None,
                user_id=user_id,
                weight=weight,
                body_fat_percentage=body_fat_percentage,
                date=self.clock(),
                notes=notes or None,
            )
        )

    def history(self, user_id: UUID, limit: int = 30) -> list[WeightLog]:
        """Return recent weight logs."""
        return self.repository.list_logs(user_id, limit)

    def delete_log(self, user_id: UUID, log_id: int) -> None:
        """Delete one of the user's weight logs."""
        if not self.repository.delete_log(user_id, log_id):
            raise NotFoundError("Weight log not found")
