"""Endpoints for weight, cardio, supplement, reminder and wellness logs."""

from datetime import date

from fastapi import APIRouter, Depends, status

from fitness_tracker.api.dependencies import get_container, require_user, store_action
from fitness_tracker.api.models import (
    CardioRequest,
    ReminderRequest,
    SupplementRequest,
    WeightRequest,
    WellnessRequest,
)
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import SessionUser
from fitness_tracker.services.wellness import sleep_percent, sleep_rating

router = APIRouter(tags=["logs"])


@router.get("/weight")
async def weight_history(
    limit: int = 30,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return recent weight logs."""
    with store_action("Failed to load weight history", user):
        logs = container.weight_service.history(user.id, limit)
    return {"logs": logs}


@router.post("/weight", status_code=status.HTTP_201_CREATED)
async def log_weight(
    payload: WeightRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Record today's weight."""
    with store_action("Failed to log weight. Please try again.", user):
        log = container.weight_service.log_weight(
            user.id,
            weight=payload.weight,
            body_fat_percentage=payload.body_fat_percentage,
            notes=payload.notes,
        )
    return {"log": log}


@router.delete("/weight/{log_id}")
async def delete_weight(
    log_id: int,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a weight log."""
    with store_action("Failed to delete weight log", user):
        container.weight_service.delete_log(user.id, log_id)
    return {"status": "deleted"}


@router.get("/cardio")
async def cardio_sessions(
    limit: int = 20,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return recent cardio sessions."""
    with store_action("Failed to load cardio sessions", user):
        sessions = container.cardio_service.list_sessions(user.id, limit)
    return {"sessions": sessions}


@router.post("/cardio", status_code=status.HTTP_201_CREATED)
async def log_cardio(
    payload: CardioRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Record a cardio session."""
    with store_action("Failed to log cardio session. Please try again.", user):
        body_weight = None
        if payload.calories_burned is None and payload.intensity:
            body_weight = container.profile_service.current_weight(user.id)
        session = container.cardio_service.log_session(
            user.id,
            cardio_type=payload.type,
            duration=payload.duration,
            distance=payload.distance,
            calories_burned=payload.calories_burned,
            notes=payload.notes,
            intensity=payload.intensity,
            body_weight_kg=body_weight,
        )
    return {"session": session}


@router.delete("/cardio/{log_id}")
async def delete_cardio(
    log_id: int,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a cardio session."""
    with store_action("Failed to delete cardio session", user):
        container.cardio_service.delete_session(user.id, log_id)
    return {"status": "deleted"}


@router.get("/supplements")
async def supplements(
    day: date | None = None,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return supplements taken on a day."""
    with store_action("Failed to load supplements", user):
        logs = container.supplement_service.list_day(user.id, day)
    return {"logs": logs}


@router.post("/supplements", status_code=status.HTTP_201_CREATED)
async def log_supplement(
    payload: SupplementRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Record a supplement."""
    with store_action("Failed to log supplement. Please try again.", user):
        log = container.supplement_service.log_supplement(
            user.id,
            name=payload.name,
            time_taken=payload.time_taken,
            dosage=payload.dosage,
        )
    return {"log": log}


@router.delete("/supplements/{log_id}")
async def delete_supplement(
    log_id: int,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a supplement log."""
    with store_action("Failed to delete supplement log", user):
        container.supplement_service.delete_log(user.id, log_id)
    return {"status": "deleted"}


@router.get("/reminders")
async def reminders(
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the user's reminders."""
    with store_action("Failed to load reminders", user):
        items = container.reminder_service.list_reminders(user.id)
    return {"reminders": items}


@router.post("/reminders", status_code=status.HTTP_201_CREATED)
async def create_reminder(
    payload: ReminderRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create a reminder."""
    with store_action("Failed to create reminder. Please try again.", user):
        reminder = container.reminder_service.create(
            user.id,
            title=payload.title,
            time=payload.time,
            days=payload.days,
            reminder_type=payload.type,
            message=payload.message,
            enabled=payload.enabled,
        )
    return {"reminder": reminder}


@router.post("/reminders/{reminder_id}/toggle")
async def toggle_reminder(
    reminder_id: int,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Enable or disable a reminder."""
    with store_action("Failed to update reminder", user):
        reminder = container.reminder_service.toggle(user.id, reminder_id)
    return {"reminder": reminder}


@router.delete("/reminders/{reminder_id}")
async def delete_reminder(
    reminder_id: int,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Delete a reminder."""
    with store_action("Failed to delete reminder", user):
        container.reminder_service.delete(user.id, reminder_id)
    return {"status": "deleted"}


@router.post("/wellness", status_code=status.HTTP_201_CREATED)
async def check_in(
    payload: WellnessRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Record today's sleep, mood and energy."""
    with store_action("Failed to save check-in. Please try again.", user):
        log = container.wellness_service.check_in(
            user.id,
            mood=payload.mood,
            energy=payload.energy,
            sleep_hours=payload.sleep_hours,
            sleep_quality=payload.sleep_quality,
            notes=payload.notes,
        )
    response: dict[str, object] = {"log": log}
    if log.sleep_hours is not None:
        response["sleep"] = {
            "rating": sleep_rating(log.sleep_hours),
            "percent": sleep_percent(log.sleep_hours),
        }
    return response
