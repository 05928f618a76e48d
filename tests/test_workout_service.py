"""Tests for workout logging and personal records."""

from datetime import date

import pytest

from fitness_tracker.domain.workouts import (
    ExerciseInput,
    ExerciseSet,
    PersonalRecord,
)
from fitness_tracker.errors import NotFoundError, ValidationError
from fitness_tracker.services.workouts import WorkoutService
from tests.conftest import TODAY, InMemoryWorkoutRepository, fixed_today


def _bench_press() -> ExerciseInput:
    return ExerciseInput(
        name="Bench Press",
        sets=[ExerciseSet(reps=8, weight=60), ExerciseSet(reps=6, weight=70)],
    )


def test_log_workout_writes_rows_and_records(user_id) -> None:
    repository = InMemoryWorkoutRepository()
    service = WorkoutService(repository, clock=fixed_today)

    result = service.log_workout(user_id, "Push day", [_bench_press()])

    assert len(repository.workouts) == 1
    assert result.workout.date == TODAY
    assert result.workout.notes == "Push day"
    assert len(result.exercises) == 1
    assert result.exercises[0].workout_id == result.workout.id
    assert result.exercises[0].sets == _bench_press().sets
    assert [(r.exercise_name, r.weight, r.reps) for r in result.personal_records] == [
        ("Bench Press", 70, 6)
    ]
    assert result.refresh == ("workouts", "personal_records")


def test_log_workout_rejects_invalid_exercises_without_writes(user_id) -> None:
    repository = InMemoryWorkoutRepository()
    service = WorkoutService(repository, clock=fixed_today)

    with pytest.raises(ValidationError) as error:
        service.log_workout(
            user_id,
            None,
            [
                _bench_press(),
                ExerciseInput(name="", sets=[ExerciseSet(reps=5, weight=50)]),
            ],
        )

    assert error.value.message == "All exercises must have a name and valid sets"
    assert repository.workouts == {}
    assert repository.exercises == {}
    assert repository.records == {}


def test_log_workout_rejects_sets_without_reps(user_id) -> None:
    repository = InMemoryWorkoutRepository()
    service = WorkoutService(repository, clock=fixed_today)

    with pytest.raises(ValidationError):
        service.log_workout(
            user_id, None, [ExerciseInput("Squat", [ExerciseSet(reps=0, weight=100)])]
        )

    assert repository.workouts == {}


def test_log_workout_removes_partial_rows_on_exercise_failure(user_id) -> None:
    repository = InMemoryWorkoutRepository(fail_on_exercise=2)
    service = WorkoutService(repository, clock=fixed_today)

    with pytest.raises(RuntimeError):
        service.log_workout(
            user_id,
            None,
            [
                _bench_press(),
                ExerciseInput("Squat", [ExerciseSet(reps=5, weight=100)]),
            ],
        )

    assert repository.workouts == {}
    assert repository.exercises == {}
    assert repository.records == {}


def test_log_workout_removes_partial_rows_on_record_failure(user_id) -> None:
    repository = InMemoryWorkoutRepository(fail_on_record=True)
    service = WorkoutService(repository, clock=fixed_today)

    with pytest.raises(RuntimeError):
        service.log_workout(user_id, None, [_bench_press()])

    assert repository.workouts == {}
    assert repository.exercises == {}


def test_best_records_reduces_history(user_id) -> None:
    repository = InMemoryWorkoutRepository()
    service = WorkoutService(repository, clock=fixed_today)
    for weight, reps, day in ((100, 5, 1), (120, 3, 2), (120, 5, 3)):
        repository.create_personal_record(
            PersonalRecord(
                id=None,
                user_id=user_id,
                exercise_name="Squat",
                weight=weight,
                reps=reps,
                date=date(2024, 4, day),
            )
        )

    best = service.best_records(user_id)

    assert [(r.weight, r.reps) for r in best] == [(120, 5)]


def test_progress_defaults_to_first_exercise(user_id) -> None:
    repository = InMemoryWorkoutRepository()
    service = WorkoutService(repository, clock=fixed_today)
    service.log_workout(user_id, None, [_bench_press()])
    service.log_workout(
        user_id, None, [ExerciseInput("Squat", [ExerciseSet(reps=5, weight=100)])]
    )

    progress = service.progress(user_id)

    assert progress.exercises == ["Bench Press", "Squat"]
    assert progress.selected == "Bench Press"
    assert [(p.weight, p.reps) for p in progress.points] == [(70, 6)]


def test_progress_without_records(user_id) -> None:
    service = WorkoutService(InMemoryWorkoutRepository(), clock=fixed_today)

    progress = service.progress(user_id)

    assert progress.exercises == []
    assert progress.selected is None
    assert progress.points == []


def test_get_exercises_checks_ownership(user_id, other_user_id) -> None:
    service = WorkoutService(InMemoryWorkoutRepository(), clock=fixed_today)
    result = service.log_workout(user_id, None, [_bench_press()])

    assert len(service.get_exercises(user_id, result.workout.id)) == 1
    with pytest.raises(NotFoundError):
        service.get_exercises(other_user_id, result.workout.id)


def test_list_recent_newest_first(user_id) -> None:
    service = WorkoutService(InMemoryWorkoutRepository(), clock=fixed_today)
    first = service.log_workout(user_id, "one", [_bench_press()])
    second = service.log_workout(user_id, "two", [_bench_press()])

    recent = service.list_recent(user_id, limit=1)

    assert [w.id for w in recent] == [second.workout.id]
    assert first.workout.id != second.workout.id


def test_best_records_heaviest_exercise_first(user_id) -> None:
    service = WorkoutService(InMemoryWorkoutRepository(), clock=fixed_today)
    service.log_workout(
        user_id, None, [ExerciseInput("Bench Press", [ExerciseSet(reps=8, weight=80)])]
    )
    service.log_workout(
        user_id, None, [ExerciseInput("Squat", [ExerciseSet(reps=5, weight=120)])]
    )

    best = service.best_records(user_id)

    assert [(r.exercise_name, r.weight) for r in best] == [
        ("Squat", 120),
        ("Bench Press", 80),
    ]
