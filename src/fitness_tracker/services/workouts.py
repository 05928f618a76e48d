"""Workout logging and personal-record service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from fitness_tracker.clock import utc_today
from fitness_tracker.domain.workouts import (
    Exercise,
    ExerciseInput,
    PersonalRecord,
    ProgressPoint,
    Workout,
    WorkoutLogResult,
)
from fitness_tracker.errors import NotFoundError, ValidationError
from fitness_tracker.services.metrics import (
    exercise_names,
    plan_workout,
    progress_series,
    reduce_personal_records,
    validate_exercises,
)

logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workouts, exercises and personal records."""

    def create_workout(self, workout: Workout) -> Workout:
        """Insert a workout and return it with its generated id."""

    def create_exercise(self, exercise: Exercise) -> Exercise:
        """Insert an exercise row."""

    def create_personal_record(self, record: PersonalRecord) -> PersonalRecord:
        """Insert a personal-record row."""

    def get_workout(self, user_id: UUID, workout_id: int) -> Workout | None:
        """Return one of the user's workouts, if present."""

    def list_recent_workouts(self, user_id: UUID, limit: int) -> list[Workout]:
        """Return the user's workouts, newest first."""

    def list_exercises(self, workout_id: int) -> list[Exercise]:
        """Return the exercises of a workout."""

    def list_personal_records(self, user_id: UUID) -> list[PersonalRecord]:
        """Return all PR rows for a user, oldest first."""

    def delete_workout(self, workout_id: int) -> None:
        """Delete a workout row."""

    def delete_exercises(self, workout_id: int) -> None:
        """Delete every exercise of a workout."""

    def delete_personal_record(self, record_id: int) -> None:
        """Delete a personal-record row."""


@dataclass
class PersonalRecordProgress:
    """Progress series for one exercise plus the exercises to choose from."""

    exercises: list[str]
    selected: str | None
    points: list[ProgressPoint]


@dataclass
class WorkoutService:
    """Service that persists workouts and derives personal records."""

    repository: WorkoutRepository
    clock: Callable[[], date] = field(default=utc_today)

    def log_workout(
        self, user_id: UUID, notes: str | None, exercises: list[ExerciseInput]
    ) -> WorkoutLogResult:
        """Validate and write a workout, its exercises and new PR rows.

        Nothing is written when validation fails. If a write fails after the
        workout row exists, rows from this submission are deleted again before
        the error is re-raised.
        """
        problems = validate_exercises(exercises)
        if problems:
            logger.info(
                "Rejected workout submission",
                extra={"user_id": str(user_id), "problems": problems},
            )
            raise ValidationError("All exercises must have a name and valid sets")

        plan = plan_workout(user_id, self.clock(), notes, exercises)
        workout = self.repository.create_workout(plan.workout)
        written_exercises: list[Exercise] = []
        written_records: list[PersonalRecord] = []
        try:
            for exercise in plan.exercises:
                written_exercises.append(
                    self.repository.create_exercise(
                        Exercise(
                            id=None,
                            workout_id=workout.id,
                            name=exercise.name,
                            sets=exercise.sets,
                        )
                    )
                )
            for record in plan.personal_records:
                written_records.append(self.repository.create_personal_record(record))
        except Exception:
            self._compensate(workout, written_records)
            raise

        logger.info(
            "Logged workout",
            extra={
                "user_id": str(user_id),
                "workout_id": workout.id,
                "exercises": len(written_exercises),
                "personal_records": len(written_records),
            },
        )
        return WorkoutLogResult(
            workout=workout,
            exercises=written_exercises,
            personal_records=written_records,
        )

    def list_recent(self, user_id: UUID, limit: int = 3) -> list[Workout]:
        """Return the most recent workouts."""
        return self.repository.list_recent_workouts(user_id, limit)

    def get_exercises(self, user_id: UUID, workout_id: int) -> list[Exercise]:
        """Return the exercises of one of the user's workouts."""
        if self.repository.get_workout(user_id, workout_id) is None:
            raise NotFoundError("Workout not found")
        return self.repository.list_exercises(workout_id)

    def best_records(self, user_id: UUID) -> list[PersonalRecord]:
        """Return the current best record per exercise, heaviest first."""
        return reduce_personal_records(self.repository.list_personal_records(user_id))

    def progress(
        self, user_id: UUID, exercise_name: str | None = None
    ) -> PersonalRecordProgress:
        """Return the PR history of one exercise, the first one by default."""
        records = self.repository.list_personal_records(user_id)
        names = exercise_names(records)
        selected = exercise_name or (names[0] if names else None)
        points = progress_series(records, selected) if selected else []
        return PersonalRecordProgress(exercises=names, selected=selected, points=points)

    def _compensate(self, workout: Workout, records: list[PersonalRecord]) -> None:
        logger.warning(
            "Workout write failed, removing partial rows",
            extra={"workout_id": workout.id},
        )
        try:
            for record in records:
                if record.id is not None:
                    self.repository.delete_personal_record(record.id)
            self.repository.delete_exercises(workout.id)
            self.repository.delete_workout(workout.id)
        except Exception:
            logger.exception(
                "Failed to remove partial workout rows",
                extra={"workout_id": workout.id},
            )
