"""Cardio session service."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.clock import utc_today
from fitness_tracker.domain.logs import CARDIO_TYPES, CardioLog
from fitness_tracker.errors import NotFoundError, ValidationError

MET_VALUES = {"low": 3.5, "medium": 7.0, "high": 10.0}


class CardioRepository(Protocol):
    """Persistence interface for cardio logs."""

    def create_log(self, log: CardioLog) -> CardioLog:
        """Insert a cardio log."""

    def list_logs(self, user_id: UUID, limit: int) -> list[CardioLog]:
        """Return cardio logs, newest first."""

    def delete_log(self, user_id: UUID, log_id: int) -> bool:
        """Delete a log; return False when nothing matched."""


@dataclass
class CardioService:
    """Service for cardio sessions."""

    repository: CardioRepository
    clock: Callable[[], date] = field(default=utc_today)

    def log_session(  # noqa: PLR0913
        self,
        user_id: UUID,
        cardio_type: str | None,
        duration: int | None,
        distance: float | None = None,
        calories_burned: int | None = None,
        notes: str | None = None,
        intensity: str | None = None,
        body_weight_kg: float | None = None,
    ) -> CardioLog:
        """Record a cardio session, estimating calories when possible."""
        if not cardio_type or not duration or duration < 0:
            raise ValidationError("Cardio type and duration are required")
        if cardio_type not in CARDIO_TYPES:
            raise ValidationError(f"Unknown cardio type: {cardio_type}")
        if calories_burned is None and intensity and body_weight_kg:
            calories_burned = estimate_calories_burned(
                duration, intensity, body_weight_kg
            )
        return self.repository.create_log(
            CardioLog(
                id=None,
                user_id=user_id,
                type=cardio_type,
                duration=duration,
                distance=distance,
                calories_burned=calories_burned,
                date=self.clock(),
                notes=notes or None,
            )
        )

    def list_sessions(self, user_id: UUID, limit: int = 20) -> list[CardioLog]:
        """Return recent cardio sessions."""
        return self.repository.list_logs(user_id, limit)

    def delete_session(self, user_id: UUID, log_id: int) -> None:
        """Delete one of the user's cardio sessions."""
        if not self.repository.delete_log(user_id, log_id):
            raise NotFoundError("Cardio session not found")


def estimate_calories_burned(
    duration_minutes: int, intensity: str, weight_kg: float
) -> int:
    """Estimate calories as MET * kg * hours."""
    met = MET_VALUES.get(intensity)
    if met is None:
        raise ValidationError(f"Unknown intensity: {intensity}")
    return round(met * weight_kg * (duration_minutes / 60))
