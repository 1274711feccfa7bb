"""Workout schemas for request/response validation."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from coachportal.domains.workouts.models import WorkoutStatus


class WorkoutFilters(BaseModel):
    """Content filters applied after the ownership filter."""

    status: WorkoutStatus | None = None
    week_number: int | None = Field(None, ge=1)


class WorkoutPatch(BaseModel):
    """Update workout request.

    Content fields only: ownership (client_id, trainer_id) cannot be
    changed through a patch.
    """

    model_config = ConfigDict(extra="forbid")

    status: WorkoutStatus | None = None
    sets: int | None = Field(None, ge=0)
    reps: int | None = Field(None, ge=0)
    weight_or_resistance: str | None = Field(None, max_length=100)
    tempo: str | None = Field(None, max_length=20)
    rest_time_seconds: int | None = Field(None, ge=0)
    exercise_notes: str | None = None
    trainer_comment: str | None = None
    week_number: int | None = Field(None, ge=1)
    workout_slot: int | None = Field(None, ge=1)

    def to_patch(self) -> dict:
        """Non-null fields set by the caller, with enums as plain values."""
        return self.model_dump(exclude_unset=True, exclude_none=True, mode="json")


class WorkoutResponse(BaseModel):
    """Workout response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    client_id: str | None = None
    trainer_id: str | None = None
    exercise_name: str
    sets: int | None = None
    reps: int | None = None
    weight_or_resistance: str | None = None
    tempo: str | None = None
    rest_time_seconds: int | None = None
    exercise_notes: str | None = None
    status: str
    week_number: int | None = None
    workout_slot: int | None = None
    trainer_comment: str | None = None
    created_at: datetime
    updated_at: datetime
