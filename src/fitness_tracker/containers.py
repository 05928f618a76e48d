"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from fitness_tracker.adapters.supabase_auth_client import HttpxSupabaseAuthClient
from fitness_tracker.adapters.supabase_cardio_repository import (
    SupabaseCardioRepository,
)
from fitness_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from fitness_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_tracker.adapters.supabase_reminder_repository import (
    SupabaseReminderRepository,
)
from fitness_tracker.adapters.supabase_supplement_repository import (
    SupabaseSupplementRepository,
)
from fitness_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightLogRepository,
)
from fitness_tracker.adapters.supabase_wellness_repository import (
    SupabaseWellnessRepository,
)
from fitness_tracker.adapters.supabase_workout_repository import (
    SupabaseWorkoutRepository,
)
from fitness_tracker.config import Settings
from fitness_tracker.services.cardio import CardioService
from fitness_tracker.services.dashboard import DashboardService
from fitness_tracker.services.food import FoodService
from fitness_tracker.services.profiles import ProfileService
from fitness_tracker.services.reminders import ReminderService
from fitness_tracker.services.sessions import SessionService
from fitness_tracker.services.supplements import SupplementService
from fitness_tracker.services.weight import WeightLogService
from fitness_tracker.services.wellness import WellnessService
from fitness_tracker.services.workouts import WorkoutService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    food_service: FoodService
    workout_service: WorkoutService
    profile_service: ProfileService
    weight_service: WeightLogService
    cardio_service: CardioService
    supplement_service: SupplementService
    reminder_service: ReminderService
    wellness_service: WellnessService
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_client = HttpxSupabaseAuthClient.create(
        base_url=resolved_settings.supabase_url,
        api_key=resolved_settings.auth_api_key,
        timeout=resolved_settings.auth_timeout_seconds,
    )
    weight_repository = SupabaseWeightLogRepository(supabase_client)
    food_service = FoodService(SupabaseFoodRepository(supabase_client))
    workout_service = WorkoutService(SupabaseWorkoutRepository(supabase_client))
    profile_service = ProfileService(
        repository=SupabaseProfileRepository(supabase_client),
        weight_repository=weight_repository,
    )
    wellness_service = WellnessService(SupabaseWellnessRepository(supabase_client))
    dashboard_service = DashboardService(
        profile_service=profile_service,
        food_service=food_service,
        workout_service=workout_service,
        wellness_service=wellness_service,
        recent_workouts_limit=resolved_settings.recent_workouts_limit,
    )

    async def close_resources() -> None:
        await auth_client.close()

    return AppContainer(
        settings=resolved_settings,
        session_service=SessionService(auth_client),
        food_service=food_service,
        workout_service=workout_service,
        profile_service=profile_service,
        weight_service=WeightLogService(weight_repository),
        cardio_service=CardioService(SupabaseCardioRepository(supabase_client)),
        supplement_service=SupplementService(
            SupabaseSupplementRepository(supabase_client)
        ),
        reminder_service=ReminderService(SupabaseReminderRepository(supabase_client)),
        wellness_service=wellness_service,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )
