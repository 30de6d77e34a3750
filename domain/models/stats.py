"""
Aggregated views over the catalog and over a user's routines.

Every breakdown is a list of ``{"_id": value, "count": n}`` groups.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from domain.models.base import CamelModel
from domain.models.enums import Difficulty, RoutineCategory
from domain.models.exercise import RecentExercise


class GroupCount(CamelModel):
    value: str = Field(..., alias="_id")
    count: int


class CatalogBreakdown(CamelModel):
    by_muscle_group: List[GroupCount] = Field(default_factory=list)
    by_difficulty: List[GroupCount] = Field(default_factory=list)
    by_equipment: List[GroupCount] = Field(default_factory=list)


class CatalogStats(CamelModel):
    """Catalog totals, per-facet counts and the newest exercises."""

    total_exercises: int
    stats: CatalogBreakdown
    recent_exercises: List[RecentExercise] = Field(default_factory=list)


class RecentRoutine(CamelModel):
    id: str
    name: str
    category: Optional[RoutineCategory] = None
    difficulty: Optional[Difficulty] = None
    estimated_duration: Optional[float] = None
    exercise_count: int = 0
    created_at: Optional[datetime] = None


class RoutineBreakdown(CamelModel):
    by_category: List[GroupCount] = Field(default_factory=list)
    by_difficulty: List[GroupCount] = Field(default_factory=list)
    by_duration: List[GroupCount] = Field(default_factory=list)


class RoutineStats(CamelModel):
    """Dashboard summary of one user's active routines."""

    total_routines: int
    stats: RoutineBreakdown
    recent_routines: List[RecentRoutine] = Field(default_factory=list)
