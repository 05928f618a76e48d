"""Supabase repository for workouts, exercises and personal records."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.workouts import (
    Exercise,
    PersonalRecord,
    Workout,
    decode_sets,
    encode_sets,
)
from fitness_tracker.errors import StoreOperationError
from fitness_tracker.services.workouts import WorkoutRepository


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workout logging."""

    client: Client

    def create_workout(self, workout: Workout) -> Workout:
        """Insert a workout row and return it with its id."""
        response = (
            self.client.table("workouts")
            .insert(
                {
                    "user_id": str(workout.user_id),
                    "date": workout.date.isoformat(),
                    "notes": workout.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to create workout")
        return _parse_workout(response.data[0])

    def create_exercise(self, exercise: Exercise) -> Exercise:
        """Insert an exercise row with its sets encoded."""
        response = (
            self.client.table("exercises")
            .insert(
                {
                    "workout_id": exercise.workout_id,
                    "name": exercise.name,
                    "sets": encode_sets(exercise.sets),
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to create exercise")
        return _parse_exercise(response.data[0])

    def create_personal_record(self, record: PersonalRecord) -> PersonalRecord:
        """Insert a personal-record row."""
        response = (
            self.client.table("personal_records")
            .insert(
                {
                    "user_id": str(record.user_id),
                    "exercise_name": record.exercise_name,
                    "weight": record.weight,
                    "reps": record.reps,
                    "date": record.date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to create personal record")
        return _parse_record(response.data[0])

    def get_workout(self, user_id: UUID, workout_id: int) -> Workout | None:
        """Return one of the user's workouts."""
        response = (
            self.client.table("workouts")
            .select("id, user_id, date, notes")
            .eq("id", workout_id)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_workout(response.data[0])

    def list_recent_workouts(self, user_id: UUID, limit: int) -> list[Workout]:
        """Return the user's latest workouts."""
        response = (
            self.client.table("workouts")
            .select("id, user_id, date, notes")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .order("id", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_workout(row) for row in response.data or []]

    def list_exercises(self, workout_id: int) -> list[Exercise]:
        """Return a workout's exercises in insertion order."""
        response = (
            self.client.table("exercises")
            .select("id, workout_id, name, sets")
            .eq("workout_id", workout_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_exercise(row) for row in response.data or []]

    def list_personal_records(self, user_id: UUID) -> list[PersonalRecord]:
        """Return all PR rows, oldest first with id as the tie-break."""
        response = (
            self.client.table("personal_records")
            .select("id, user_id, exercise_name, weight, reps, date")
            .eq("user_id", str(user_id))
            .order("date", desc=False)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_record(row) for row in response.data or []]

    def delete_workout(self, workout_id: int) -> None:
        """Delete a workout row."""
        self.client.table("workouts").delete().eq("id", workout_id).execute()

    def delete_exercises(self, workout_id: int) -> None:
        """Delete the exercises of a workout."""
        self.client.table("exercises").delete().eq("workout_id", workout_id).execute()

    def delete_personal_record(self, record_id: int) -> None:
        """Delete a personal-record row."""
        self.client.table("personal_records").delete().eq("id", record_id).execute()


def _parse_workout(row: dict[str, object]) -> Workout:
    return Workout(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        notes=row.get("notes"),
    )


def _parse_exercise(row: dict[str, object]) -> Exercise:
    return Exercise(
        id=row.get("id"),
        workout_id=int(row["workout_id"]),
        name=str(row.get("name", "")),
        sets=decode_sets(row.get("sets")),
    )


def _parse_record(row: dict[str, object]) -> PersonalRecord:
    return PersonalRecord(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        exercise_name=str(row.get("exercise_name", "")),
        weight=float(row.get("weight", 0.0)),
        reps=int(row.get("reps", 0)),
        date=date.fromisoformat(str(row["date"])),
    )
