"""Domain models for strength workouts and personal records."""

import json
from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class ExerciseSet:
    """One set of an exercise."""

    reps: int
    weight: float


@dataclass(frozen=True)
class ExerciseInput:
    """An exercise as submitted, before it is persisted."""

    name: str
    sets: list[ExerciseSet]


@dataclass(frozen=True)
class Workout:
    """A logged workout session."""

    id: int | None
    user_id: UUID
    date: date
    notes: str | None


@dataclass(frozen=True)
class Exercise:
    """An exercise row owned by a workout."""

    id: int | None
    workout_id: int
    name: str
    sets: list[ExerciseSet]


@dataclass(frozen=True)
class PersonalRecord:
    """Heaviest set of an exercise in one session."""

    id: int | None
    user_id: UUID
    exercise_name: str
    weight: float
    reps: int
    date: date


@dataclass(frozen=True)
class ProgressPoint:
    """Single point of a personal-record progress series."""

    date: date
    weight: float
    reps: int


@dataclass(frozen=True)
class WorkoutLogResult:
    """Rows written for one workout submission."""

    workout: Workout
    exercises: list[Exercise]
    personal_records: list[PersonalRecord]
    refresh: tuple[str, ...] = ("workouts", "personal_records")


EXERCISE_TEMPLATES: dict[str, tuple[str, ...]] = {
    "chest": (
        "Bench Press",
        "Incline Bench Press",
        "Chest Fly",
        "Push-Up",
        "Dumbbell Press",
    ),
    "back": ("Pull-Up", "Lat Pulldown", "Barbell Row", "Dumbbell Row", "Deadlift"),
    "legs": ("Squat", "Leg Press", "Leg Extension", "Leg Curl", "Calf Raise"),
    "shoulders": (
        "Overhead Press",
        "Lateral Raise",
        "Front Raise",
        "Face Pull",
        "Shrug",
    ),
    "arms": (
        "Bicep Curl",
        "Tricep Extension",
        "Hammer Curl",
        "Skull Crusher",
        "Chin-Up",
    ),
}


SETS_SCHEMA_VERSION = 1


def encode_sets(sets: list[ExerciseSet]) -> str:
    """Encode sets as the JSON array text stored on exercise rows."""
    return json.dumps([{"reps": item.reps, "weight": item.weight} for item in sets])


def decode_sets(raw: object) -> list[ExerciseSet]:
    """Decode stored sets from JSON text or an already structured list."""
    if raw is None or raw == "":
        return []
    payload = json.loads(raw) if isinstance(raw, str) else raw
    if not isinstance(payload, list):
        raise ValueError("Exercise sets must be a list")
    if not all(isinstance(item, dict) for item in payload):
        raise ValueError("Each exercise set must be an object")
    return [
        ExerciseSet(reps=int(item.get("reps", 0)), weight=float(item.get("weight", 0)))
        for item in payload
    ]
