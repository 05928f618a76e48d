"""Workout and personal-record endpoints."""

from fastapi import APIRouter, Depends, Query, status

from fitness_tracker.api.dependencies import get_container, require_user, store_action
from fitness_tracker.api.models import WorkoutRequest
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import SessionUser
from fitness_tracker.domain.workouts import (
    EXERCISE_TEMPLATES,
    ExerciseInput,
    ExerciseSet,
)

router = APIRouter(tags=["workouts"])


@router.get("/workouts")
async def recent_workouts(
    limit: int | None = Query(default=None, gt=0),
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the latest workouts."""
    resolved_limit = (
        limit if limit is not None else container.settings.recent_workouts_limit
    )
    with store_action("Failed to load workouts", user):
        workouts = container.workout_service.list_recent(user.id, resolved_limit)
    return {"workouts": workouts}


@router.post("/workouts", status_code=status.HTTP_201_CREATED)
async def log_workout(
    payload: WorkoutRequest,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a workout with its exercises and derived personal records."""
    exercises = [
        ExerciseInput(
            name=exercise.name.strip(),
            sets=[
                ExerciseSet(reps=item.reps, weight=item.weight)
                for item in exercise.sets
            ],
        )
        for exercise in payload.exercises
    ]
    with store_action("Failed to log workout. Please try again.", user):
        result = container.workout_service.log_workout(
            user.id, payload.notes, exercises
        )
    return {
        "workout": result.workout,
        "exercises": result.exercises,
        "personal_records": result.personal_records,
        "refresh": list(result.refresh),
    }


@router.get("/workouts/templates")
async def exercise_templates() -> dict[str, object]:
    """Return common exercises grouped by muscle group."""
    return {"templates": EXERCISE_TEMPLATES}


@router.get("/workouts/{workout_id}/exercises")
async def workout_exercises(
    workout_id: int,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the exercises of a workout."""
    with store_action("Failed to load exercises", user):
        exercises = container.workout_service.get_exercises(user.id, workout_id)
    return {"exercises": exercises}


@router.get("/personal-records")
async def personal_records(
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the best record per exercise, heaviest first."""
    with store_action("Failed to load personal records", user):
        records = container.workout_service.best_records(user.id)
    return {"personal_records": records}


@router.get("/personal-records/progress")
async def personal_record_progress(
    exercise: str | None = None,
    user: SessionUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the PR history of one exercise for charting."""
    with store_action("Failed to load personal records", user):
        progress = container.workout_service.progress(user.id, exercise)
    return {
        "exercises": progress.exercises,
        "selected": progress.selected,
        "points": progress.points,
    }
