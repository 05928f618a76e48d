"""Dashboard summary service."""

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from fitness_tracker.domain.logs import WellnessLog
from fitness_tracker.domain.models import SessionUser
from fitness_tracker.domain.nutrition import MacroProgress, MacroSummary
from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services.food import FoodService
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.wellness import WellnessService
from fitness_tracker.services.workouts import WorkoutService

MOTIVATIONAL_QUOTES = (
    "The only bad workout is the one that didn't happen.",
    "Your body can stand almost anything. It's your mind that you have to convince.",
    "The pain you feel today will be the strength you feel tomorrow.",
    "Fitness is not about being better than someone else. "
    "It's about being better than you used to be.",
    "The hardest lift of all is lifting your butt off the couch.",
    "Don't wish for it, work for it.",
    "Sweat is just fat crying.",
    "You don't have to be extreme, just consistent.",
    "The only way to define your limits is by going beyond them.",
    "Your health is an investment, not an expense.",
)


@dataclass
class DashboardSummary:
    """Everything the home screen shows."""

    onboarding_completed: bool
    quote: str
    macros: MacroSummary | None = None
    progress: MacroProgress | None = None
    food_entries_today: int = 0
    recent_workouts: list[Workout] = field(default_factory=list)
    wellness: WellnessLog | None = None


@dataclass
class DashboardService:
    """Compose the dashboard from the other services."""

    profile_service: ProfileService
    food_service: FoodService
    workout_service: WorkoutService
    wellness_service: WellnessService
    recent_workouts_limit: int = 3
    choose_quote: Callable[[tuple[str, ...]], str] = field(default=random.choice)

    def get_summary(self, user: SessionUser) -> DashboardSummary:
        """Return the dashboard, or only the onboarding gate if not onboarded."""
        quote = self.choose_quote(MOTIVATIONAL_QUOTES)
        if not self.profile_service.has_completed_onboarding(user.id):
            return DashboardSummary(onboarding_completed=False, quote=quote)
        macros, progress, count = self.food_service.summarize_day(user.id)
        return DashboardSummary(
            onboarding_completed=True,
            quote=quote,
            macros=macros,
            progress=progress,
            food_entries_today=count,
            recent_workouts=self.workout_service.list_recent(
                user.id, self.recent_workouts_limit
            ),
            wellness=self.wellness_service.latest(user.id),
        )
