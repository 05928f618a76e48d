"""Sleep, mood and energy check-ins."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.clock import utc_today
from fitness_tracker.domain.logs import WellnessLog
from fitness_tracker.errors import ValidationError

SLEEP_TARGET_HOURS = 9
POOR_SLEEP_HOURS = 6
FAIR_SLEEP_HOURS = 7
SCALE_MIN = 1
SCALE_MAX = 5


class WellnessRepository(Protocol):
    """Persistence interface for wellness check-ins."""

    def create_log(self, log: WellnessLog) -> WellnessLog:
        """Insert a check-in."""

    def latest_log(self, user_id: UUID) -> WellnessLog | None:
        """Return the most recent check-in."""


@dataclass
class WellnessService:
    """Service for daily wellness check-ins."""

    repository: WellnessRepository
    clock: Callable[[], date] = field(default=utc_today)

    def check_in(  # noqa: PLR0913
        self,
        user_id: UUID,
        mood: int,
        energy: int,
        sleep_hours: float | None = None,
        sleep_quality: int | None = None,
        notes: str | None = None,
    ) -> WellnessLog:
        """Record today's check-in."""
        for label, value in (("Mood", mood), ("Energy", energy)):
            _check_scale(label, value)
        if sleep_quality is not None:
            _check_scale("Sleep quality", sleep_quality)
        if sleep_hours is not None and not 0 <= sleep_hours <= 24:  # noqa: PLR2004
            raise ValidationError("Sleep hours must be between 0 and 24")
        return self.repository.create_log(
            WellnessLog(
                id=None,
                user_id=user_id,
                sleep_hours=sleep_hours,
                sleep_quality=sleep_quality,
                mood=mood,
                energy=energy,
                notes=notes or None,
                date=self.clock(),
            )
        )

    def latest(self, user_id: UUID) -> WellnessLog | None:
        """Return the most recent check-in."""
        return self.repository.latest_log(user_id)


def sleep_rating(hours: float) -> str:
    """Classify a night's sleep as poor, fair or good."""
    if hours < POOR_SLEEP_HOURS:
        return "poor"
    if hours < FAIR_SLEEP_HOURS:
        return "fair"
    return "good"


def sleep_percent(hours: float) -> float:
    """Return hours slept as a percent of the nightly target."""
    return hours / SLEEP_TARGET_HOURS * 100


def _check_scale(label: str, value: int) -> None:
    if not SCALE_MIN <= value <= SCALE_MAX:
        raise ValidationError(f"{label} must be between {SCALE_MIN} and {SCALE_MAX}")
