"""Fitness metrics computed from logged rows.

All functions here are pure: they take rows that were already read from the
store and return derived values. Writing is left to the services.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from fitness_tracker.domain.nutrition import FoodEntry, MacroProgress, MacroSummary
from fitness_tracker.domain.workouts import (
    ExerciseInput,
    ExerciseSet,
    PersonalRecord,
    ProgressPoint,
    Workout,
)


def summarize_macros(entries: Iterable[FoodEntry]) -> MacroSummary:
    """Sum calories and macros, counting missing macros as zero."""
    calories = protein = carbs = fat = 0.0
    for entry in entries:
        calories += entry.calories
        protein += entry.protein or 0
        carbs += entry.carbs or 0
        fat += entry.fat or 0
    return MacroSummary(calories=calories, protein=protein, carbs=carbs, fat=fat)


def macro_progress(summary: MacroSummary, goals: MacroSummary) -> MacroProgress:
    """Return the percent of each goal reached."""
    return MacroProgress(
        calories=_percent(summary.calories, goals.calories),
        protein=_percent(summary.protein, goals.protein),
        carbs=_percent(summary.carbs, goals.carbs),
        fat=_percent(summary.fat, goals.fat),
    )


def reduce_personal_records(
    records: Iterable[PersonalRecord],
) -> list[PersonalRecord]:
    """Keep the best record per exercise, heaviest first.

    A record replaces the current best for its exercise only when it is
    strictly heavier, or equally heavy with strictly more reps. Full ties keep
    the record seen first, so the result depends on the input order.
    """
    best: dict[str, PersonalRecord] = {}
    for record in records:
        current = best.get(record.exercise_name)
        if current is None or _dominates(record, current):
            best[record.exercise_name] = record
    return sorted(best.values(), key=lambda record: record.weight, reverse=True)


def progress_series(
    records: Iterable[PersonalRecord], exercise_name: str
) -> list[ProgressPoint]:
    """Project one exercise's records into chart points, keeping input order."""
    return [
        ProgressPoint(date=record.date, weight=record.weight, reps=record.reps)
        for record in records
        if record.exercise_name == exercise_name
    ]


def exercise_names(records: Iterable[PersonalRecord]) -> list[str]:
    """Return distinct exercise names in first-seen order."""
    return list(dict.fromkeys(record.exercise_name for record in records))


def heaviest_set(sets: list[ExerciseSet]) -> ExerciseSet | None:
    """Return the set with the greatest weight; the first one wins ties."""
    heaviest: ExerciseSet | None = None
    for item in sets:
        if heaviest is None or item.weight > heaviest.weight:
            heaviest = item
    return heaviest


def validate_exercises(exercises: list[ExerciseInput]) -> list[str]:
    """Return the problems that make a workout submission invalid."""
    if not exercises:
        return ["At least one exercise is required"]
    problems = []
    for index, exercise in enumerate(exercises, start=1):
        if not exercise.name.strip():
            problems.append(f"Exercise {index} needs a name")
        if not exercise.sets:
            problems.append(f"Exercise {index} needs at least one set")
        for item in exercise.sets:
            if item.reps <= 0:
                problems.append(f"Exercise {index} has a set without reps")
                break
        if any(item.weight < 0 for item in exercise.sets):
            problems.append(f"Exercise {index} has a negative weight")
    return problems


@dataclass(frozen=True)
class WorkoutPlan:
    """Rows to write for one workout submission, in write order."""

    workout: Workout
    exercises: list[ExerciseInput]
    personal_records: list[PersonalRecord]


def plan_workout(
    user_id: UUID, today: date, notes: str | None, exercises: list[ExerciseInput]
) -> WorkoutPlan:
    """Split a submission into workout, exercise and personal-record rows."""
    workout = Workout(id=None, user_id=user_id, date=today, notes=notes or None)
    records = []
    for exercise in exercises:
        top = heaviest_set(exercise.sets)
        if top is None or top.weight <= 0:
            continue
        records.append(
            PersonalRecord(
                id=None,
                user_id=user_id,
                exercise_name=exercise.name,
                weight=top.weight,
                reps=top.reps,
                date=today,
            )
        )
    return WorkoutPlan(workout=workout, exercises=exercises, personal_records=records)


def _dominates(candidate: PersonalRecord, current: PersonalRecord) -> bool:
    if candidate.weight != current.weight:
        return candidate.weight > current.weight
    return candidate.reps > current.reps


def _percent(value: float, goal: float) -> float:
    if not goal:
        return 0.0
    return value / goal * 100
