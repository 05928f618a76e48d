"""Session, profile, onboarding and dashboard endpoints."""

from fastapi import APIRouter, Depends, Header, status

from fitness_tracker.api.dependencies import (
    bearer_token,
    get_container,
    get_view_state,
    require_user,
    store_action,
)
from fitness_tracker.api.models import OnboardingRequest
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import (
    Authenticated,
    Pending,
    SessionUser,
    ViewState,
)
from fitness_tracker.domain.profile import OnboardingAnswers
from fitness_tracker.services.wellness import sleep_rating

router = APIRouter(tags=["account"])


@router.get("/session")
async def session_state(
    view_state: ViewState = Depends(get_view_state),
) -> dict[str, object]:
    """Return the resolved view state for the request."""
    if isinstance(view_state, Authenticated):
        return {"state": "authenticated", "user": view_state.user}
    if isinstance(view_state, Pending):
        return {"state": "pending"}
    return {"state": "anonymous"}


@router.post("/auth/logout")
async def logout(
    authorization: str | None = Header(default=None),
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Sign the current session out."""
    token = bearer_token(authorization)
    with store_action("Failed to log out", user):
        await container.session_service.sign_out(token or "")
    return {"status": "signed_out"}


@router.get("/profile")
async def get_profile(
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the account and stored profile."""
    with store_action("Failed to load profile", user):
        profile = container.profile_service.get_profile(user.id)
    return {"user": user, "profile": profile}


@router.post("/onboarding", status_code=status.HTTP_201_CREATED)
async def complete_onboarding(
    payload: OnboardingRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Save onboarding answers."""
    answers = OnboardingAnswers(
        goal=payload.goal,
        height=payload.height,
        weight=payload.weight,
        target_weight=payload.target_weight,
        activity_level=payload.activity_level,
        preferred_training=payload.preferred_training,
    )
    with store_action("Failed to save your profile. Please try again.", user):
        profile = container.profile_service.complete_onboarding(user.id, answers)
    return {"profile": profile, "redirect": "dashboard"}


@router.get("/dashboard")
async def dashboard(
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the home dashboard, or a redirect to onboarding."""
    with store_action("Failed to load dashboard", user):
        summary = container.dashboard_service.get_summary(user)
    if not summary.onboarding_completed:
        return {"redirect": "onboarding", "quote": summary.quote}
    wellness = summary.wellness
    sleep = None
    if wellness and wellness.sleep_hours is not None:
        sleep = {
            "hours": wellness.sleep_hours,
            "quality": wellness.sleep_quality,
            "rating": sleep_rating(wellness.sleep_hours),
        }
    return {
        "quote": summary.quote,
        "nutrition": {
            "totals": summary.macros,
            "progress": summary.progress,
            "entries": summary.food_entries_today,
        },
        "recent_workouts": summary.recent_workouts,
        "wellness": wellness,
        "sleep": sleep,
    }
