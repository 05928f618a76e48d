"""Domain models for user profiles and body weight."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

FITNESS_GOALS = frozenset({"lose_fat", "gain_muscle", "maintain"})
ACTIVITY_LEVELS = frozenset({"sedentary", "light", "moderate", "active", "very_active"})
TRAINING_PREFERENCES = frozenset(
    {"strength", "cardio", "hiit", "yoga", "calisthenics", "crossfit", "other"}
)


@dataclass(frozen=True)
class UserProfile:
    """Onboarding answers stored for a user."""

    id: int | None
    user_id: UUID
    goal: str
    height: float | None
    weight: float | None
    target_weight: float | None
    activity_level: str | None
    preferred_training: str | None
    onboarding_completed: bool
    created_at: datetime | None = None


@dataclass(frozen=True)
class OnboardingAnswers:
    """Answers collected by the onboarding flow."""

    goal: str = "maintain"
    height: float | None = None
    weight: float | None = None
    target_weight: float | None = None
    activity_level: str | None = "moderate"
    preferred_training: str | None = "strength"


@dataclass(frozen=True)
class WeightLog:
    """A body-weight measurement."""

    id: int | None
    user_id: UUID
    weight: float
    body_fat_percentage: float | None
    date: date
    notes: str | None = None
