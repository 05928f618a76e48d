"""Profile and onboarding service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.clock import utc_today
from fitness_tracker.domain.profile import (
    ACTIVITY_LEVELS,
    FITNESS_GOALS,
    TRAINING_PREFERENCES,
    OnboardingAnswers,
    UserProfile,
    WeightLog,
)
from fitness_tracker.errors import ValidationError
from fitness_tracker.services.weight import WeightLogRepository

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if present."""

    def create_profile(self, profile: UserProfile) -> UserProfile:
        """Insert a profile and return the stored row."""


@dataclass
class ProfileService:
    """Service for onboarding and profile lookups."""

    repository: ProfileRepository
    weight_repository: WeightLogRepository
    clock: Callable[[], date] = field(default=utc_today)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile."""
        return self.repository.get_profile(user_id)

    def has_completed_onboarding(self, user_id: UUID) -> bool:
        """Return True when the profile exists and onboarding is flagged done."""
        profile = self.repository.get_profile(user_id)
        return bool(profile and profile.onboarding_completed)

    def complete_onboarding(
        self, user_id: UUID, answers: OnboardingAnswers
    ) -> UserProfile:
        """Store the onboarding answers and log the starting weight, if given."""
        _validate_answers(answers)
        if self.has_completed_onboarding(user_id):
            raise ValidationError("Onboarding is already complete")
        profile = self.repository.create_profile(
            UserProfile(
                id=None,
                user_id=user_id,
                goal=answers.goal,
                height=answers.height or None,
                weight=answers.weight or None,
                target_weight=answers.target_weight or None,
                activity_level=answers.activity_level or None,
                preferred_training=answers.preferred_training or None,
                onboarding_completed=True,
            )
        )
        if answers.weight:
            self.weight_repository.create_log(
                WeightLog(
                    id=None,
                    user_id=user_id,
                    weight=answers.weight,
                    body_fat_percentage=None,
                    date=self.clock(),
                )
            )
        logger.info("Completed onboarding", extra={"user_id": str(user_id)})
        return profile

    def current_weight(self, user_id: UUID) -> float | None:
        """Return the latest logged body weight, else the profile weight."""
        latest = self.weight_repository.list_logs(user_id, limit=1)
        if latest:
            return latest[0].weight
        profile = self.repository.get_profile(user_id)
        return profile.weight if profile else None


def _validate_answers(answers: OnboardingAnswers) -> None:
    if answers.goal not in FITNESS_GOALS:
        raise ValidationError(f"Unknown goal: {answers.goal}")
    if answers.activity_level and answers.activity_level not in ACTIVITY_LEVELS:
        raise ValidationError(f"Unknown activity level: {answers.activity_level}")
    if (
        answers.preferred_training
        and answers.preferred_training not in TRAINING_PREFERENCES
    ):
        raise ValidationError(
            f"Unknown training preference: {answers.preferred_training}"
        )
