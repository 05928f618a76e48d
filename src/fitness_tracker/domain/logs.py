"""Domain models for simple dated logs."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

CARDIO_TYPES = frozenset(
    {
        "running",
        "cycling",
        "swimming",
        "walking",
        "elliptical",
        "rowing",
        "stair_climber",
        "hiit",
        "other",
    }
)
REMINDER_TYPES = frozenset({"workout", "meal", "supplement", "water", "sleep", "other"})
WEEKDAYS = frozenset({"0", "1", "2", "3", "4", "5", "6"})


@dataclass(frozen=True)
class CardioLog:
    """A cardio session."""

    id: int | None
    user_id: UUID
    type: str
    duration: int
    distance: float | None
    calories_burned: int | None
    date: date
    notes: str | None


@dataclass(frozen=True)
class SupplementLog:
    """A supplement intake."""

    id: int | None
    user_id: UUID
    name: str
    dosage: str | None
    time_taken: str
    date: date


@dataclass(frozen=True)
class Reminder:
    """A recurring reminder on selected weekdays."""

    id: int | None
    user_id: UUID
    type: str
    title: str
    message: str | None
    time: str
    days: list[str]
    enabled: bool


@dataclass(frozen=True)
class WellnessLog:
    """Daily sleep, mood and energy check-in."""

    id: int | None
    user_id: UUID
    sleep_hours: float | None
    sleep_quality: int | None
    mood: int
    energy: int
    notes: str | None
    date: date
