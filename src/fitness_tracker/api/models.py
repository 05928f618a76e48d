"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field


class FoodEntryRequest(BaseModel):
    """Manual food entry."""

    name: str | None = None
    calories: int | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class QuickAddRequest(BaseModel):
    """Quick-add selection from the food catalog."""

    name: str


class ExerciseSetPayload(BaseModel):
    """One set of an exercise."""

    reps: int = 0
    weight: float = 0.0


class ExercisePayload(BaseModel):
    """An exercise with its sets."""

    name: str = ""
    sets: list[ExerciseSetPayload] = Field(default_factory=list)


class WorkoutRequest(BaseModel):
    """Workout submission."""

    notes: str | None = None
    exercises: list[ExercisePayload] = Field(default_factory=list)


class OnboardingRequest(BaseModel):
    """Onboarding answers."""

    goal: str = "maintain"
    height: float | None = Field(default=None, gt=0)
    weight: float | None = Field(default=None, gt=0)
    target_weight: float | None = Field(default=None, gt=0)
    activity_level: str | None = "moderate"
    preferred_training: str | None = "strength"


class WeightRequest(BaseModel):
    """Body-weight measurement."""

    weight: float | None = None
    body_fat_percentage: float | None = Field(default=None, ge=0, le=100)
    notes: str | None = None


class CardioRequest(BaseModel):
    """Cardio session."""

    type: str | None = "running"
    duration: int | None = Field(default=None, gt=0)
    distance: float | None = Field(default=None, ge=0)
    calories_burned: int | None = Field(default=None, ge=0)
    notes: str | None = None
    intensity: str | None = None


class SupplementRequest(BaseModel):
    """Supplement intake."""

    name: str | None = None
    dosage: str | None = None
    time_taken: str | None = None


class ReminderRequest(BaseModel):
    """Recurring reminder."""

    type: str = "workout"
    title: str | None = None
    message: str | None = None
    time: str | None = "08:00"
    days: list[str] = Field(default_factory=lambda: ["1", "3", "5"])
    enabled: bool = True


class WellnessRequest(BaseModel):
    """Daily check-in."""

    mood: int = 4
    energy: int = 3
    sleep_hours: float | None = None
    sleep_quality: int | None = None
    notes: str | None = None
