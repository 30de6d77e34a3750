"""
Exercise catalog entry.

Exercises are globally shared (no owner). They are created one at a time, in
bulk, or by seeding the default catalog, and are never updated or deleted.
Routines and workout logs reference them by id only.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import AnyUrl, Field, TypeAdapter, ValidationError, field_validator

from domain.models.base import CamelModel, PayloadModel, none_as_empty_list
from domain.models.enums import Difficulty, Equipment, MuscleGroup

_URI = TypeAdapter(AnyUrl)


class ExerciseCreate(PayloadModel):
    """
    Payload for creating a catalog exercise.

    Examples:
        >>> ExerciseCreate(name="  Sentadillas ", muscleGroups=["legs"]).name
        'Sentadillas'
    """

    name: str = Field(..., min_length=3, max_length=100, description="Exercise name")
    description: Optional[str] = Field(default=None, max_length=500)
    muscle_groups: List[MuscleGroup] = Field(default_factory=list)
    equipment: List[Equipment] = Field(default_factory=list)
    difficulty: Difficulty = Difficulty.BEGINNER
    instructions: List[str] = Field(default_factory=list, description="Ordered steps")
    tips: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    video_url: Optional[str] = None

    @field_validator("image_url", "video_url")
    @classmethod
    def validate_uri(cls, value: Optional[str]) -> Optional[str]:
        # Checked as a URI but stored exactly as sent.
        if value is None:
            return value
        try:
            _URI.validate_python(value)
        except ValidationError:
            raise ValueError("must be a valid URI")
        return value

    def to_record(self) -> Dict[str, Any]:
        """Storage representation (snake_case keys, plain JSON values)."""
        return self.model_dump(mode="json")


class Exercise(CamelModel):
    """A stored catalog exercise."""

    id: str
    name: str
    description: Optional[str] = None
    muscle_groups: List[MuscleGroup] = Field(default_factory=list)
    equipment: List[Equipment] = Field(default_factory=list)
    difficulty: Optional[Difficulty] = Difficulty.BEGINNER
    instructions: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("muscle_groups", "equipment", "instructions", "tips", mode="before")
    @classmethod
    def coerce_null_lists(cls, value):
        return none_as_empty_list(value)


class RecentExercise(CamelModel):
    """Projection of an exercise used by the catalog statistics."""

    id: Optional[str] = None
    name: str
    difficulty: Optional[Difficulty] = None
    muscle_groups: List[MuscleGroup] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @field_validator("muscle_groups", mode="before")
    @classmethod
    def coerce_null_lists(cls, value):
        return none_as_empty_list(value)
