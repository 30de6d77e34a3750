"""
Routine aggregate: a user-owned, ordered list of exercise prescriptions.

Each entry references a catalog exercise by id and embeds its own sets, so a
routine is always written as a single document. Readers get the entries back
with the referenced exercise resolved (or None when the reference dangles).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, Field, field_validator

from domain.models.base import CamelModel, PayloadModel, none_as_empty_list
from domain.models.enums import Difficulty, Equipment, RoutineCategory
from domain.models.exercise import Exercise


class SetEntry(CamelModel):
    """
    One prescribed set.

    Every measurement is optional and independent: a timed set may carry only
    a duration, a strength set only reps and weight. An omitted value stays
    None, which is different from 0.
    """

    reps: Optional[float] = Field(default=None, ge=1, le=1000)
    weight: Optional[float] = Field(default=None, ge=0, le=1000)
    duration: Optional[float] = Field(
        default=None,
        ge=1,
        le=3600,
        validation_alias=AliasChoices("duration", "durationSeconds"),
        description="Seconds",
    )
    rest: Optional[float] = Field(
        default=None,
        ge=0,
        le=600,
        validation_alias=AliasChoices("rest", "restSeconds"),
        description="Rest after the set, in seconds",
    )
    completed: bool = False


class WorkoutExerciseInput(PayloadModel):
    """An entry of a routine payload."""

    exercise: str = Field(..., min_length=1, description="Referenced exercise id")
    sets: List[SetEntry] = Field(default_factory=list)
    notes: Optional[str] = Field(default=None, max_length=500)
    order: Optional[int] = Field(default=None, ge=0)

    def to_record(self, index: int) -> Dict[str, Any]:
        # Position defaults to the entry's index in the payload.
        return {
            "exercise_id": self.exercise,
            "sets": [s.model_dump(mode="json") for s in self.sets],
            "notes": self.notes,
            "order": self.order if self.order is not None else index,
        }


class RoutinePayload(PayloadModel):
    """
    Payload for creating or fully replacing a routine.

    Update uses the same model as create: omitted optional fields fall back
    to their defaults.
    """

    name: str = Field(..., min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    exercises: List[WorkoutExerciseInput] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    difficulty: Difficulty = Difficulty.BEGINNER
    estimated_duration: float = Field(
        default=30,
        ge=1,
        le=480,
        validation_alias=AliasChoices("estimatedDuration", "estimatedDurationMinutes"),
        description="Minutes",
    )
    is_public: bool = False
    category: RoutineCategory = RoutineCategory.STRENGTH
    equipment: List[Equipment] = Field(default_factory=list)

    def to_record(self) -> Dict[str, Any]:
        """Storage representation of the mutable fields."""
        record = self.model_dump(mode="json", exclude={"exercises"})
        record["exercises"] = [
            entry.to_record(index) for index, entry in enumerate(self.exercises)
        ]
        return record


class RoutineExerciseEntry(CamelModel):
    """A routine entry with its exercise reference resolved."""

    exercise_id: str
    exercise: Optional[Exercise] = None
    sets: List[SetEntry] = Field(default_factory=list)
    notes: Optional[str] = None
    order: int = 0

    @field_validator("sets", mode="before")
    @classmethod
    def coerce_null_sets(cls, value):
        return none_as_empty_list(value)


class Routine(CamelModel):
    """A stored routine as returned to callers."""

    id: str
    name: str
    description: Optional[str] = None
    owner_id: str
    exercises: List[RoutineExerciseEntry] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    difficulty: Difficulty = Difficulty.BEGINNER
    estimated_duration: float = 30
    is_public: bool = False
    category: RoutineCategory = RoutineCategory.STRENGTH
    equipment: List[Equipment] = Field(default_factory=list)
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("exercises", "tags", "equipment", mode="before")
    @classmethod
    def coerce_null_lists(cls, value):
        return none_as_empty_list(value)
