"""
Workout log: historical record of one performed session.

A log copies the performed exercises and sets at creation time. It keeps only
the ids of the routine and exercises it refers to, so later edits to the
routine never change a stored log.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, Field, field_validator

from domain.models.base import CamelModel, PayloadModel, none_as_empty_list
from domain.models.exercise import Exercise
from domain.models.routine import Routine, SetEntry


class LoggedSet(SetEntry):
    """A performed set; completion is recorded only when the client sends it."""

    completed: Optional[bool] = None


class LoggedExerciseInput(PayloadModel):
    exercise: str = Field(..., min_length=1, description="Referenced exercise id")
    sets: List[LoggedSet] = Field(default_factory=list)
    notes: Optional[str] = Field(default=None, max_length=500)

    def to_record(self) -> Dict[str, Any]:
        return {
            "exercise_id": self.exercise,
            "sets": [s.model_dump(mode="json") for s in self.sets],
            "notes": self.notes,
        }


class WorkoutLogPayload(PayloadModel):
    """Payload for recording a workout session."""

    routine: str = Field(..., min_length=1, description="Referenced routine id")
    exercises: List[LoggedExerciseInput] = Field(default_factory=list)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[float] = Field(
        default=None,
        ge=1,
        le=480,
        validation_alias=AliasChoices("duration", "durationMinutes"),
        description="Minutes",
    )
    notes: Optional[str] = Field(default=None, max_length=500)
    rating: Optional[int] = Field(default=None, ge=1, le=5)

    def to_record(self) -> Dict[str, Any]:
        return {
            "routine_id": self.routine,
            "exercises": [entry.to_record() for entry in self.exercises],
            "start_time": self.start_time.isoformat() if self.start_time else None,
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "duration": self.duration,
            "notes": self.notes,
            "rating": self.rating,
        }


class LoggedExerciseEntry(CamelModel):
    exercise_id: str
    exercise: Optional[Exercise] = None
    sets: List[LoggedSet] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator("sets", mode="before")
    @classmethod
    def coerce_null_sets(cls, value):
        return none_as_empty_list(value)


class WorkoutLog(CamelModel):
    """A stored workout log with its references resolved."""

    id: str
    owner_id: str
    routine_id: str
    routine: Optional[Routine] = None
    exercises: List[LoggedExerciseEntry] = Field(default_factory=list)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[float] = None
    notes: Optional[str] = None
    rating: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("exercises", mode="before")
    @classmethod
    def coerce_null_exercises(cls, value):
        return none_as_empty_list(value)
