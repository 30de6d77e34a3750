"""
Domain models for the routine service.

These models are independent of the HTTP layer and the store:
- Exercise: shared catalog entry
- Routine: user-owned ordered list of exercise prescriptions
- WorkoutLog: snapshot of one performed session
- query: pagination and filter value objects
- stats: catalog and routine aggregations

Usage:
    >>> from domain.models import RoutinePayload

    >>> payload = RoutinePayload(
    ...     name="Pierna y core",
    ...     exercises=[{"exercise": "4b1c...", "sets": [{"reps": 10, "weight": 20}]}],
    ... )
    >>> payload.to_record()["exercises"][0]["order"]
    0
"""

from domain.models.base import (
    CamelModel,
    PayloadModel,
    describe_first_error,
    is_valid_id,
)
from domain.models.enums import (
    Difficulty,
    DurationBucket,
    Equipment,
    MuscleGroup,
    RoutineCategory,
)
from domain.models.exercise import Exercise, ExerciseCreate, RecentExercise
from domain.models.query import (
    DateRange,
    ExerciseFilters,
    Page,
    PageRequest,
    RoutineFilters,
    as_utc,
    page_count,
)
from domain.models.stats import (
    CatalogBreakdown,
    CatalogStats,
    GroupCount,
    RecentRoutine,
    RoutineBreakdown,
    RoutineStats,
)
from domain.models.routine import (
    Routine,
    RoutineExerciseEntry,
    RoutinePayload,
    SetEntry,
    WorkoutExerciseInput,
)
from domain.models.workout_log import (
    LoggedExerciseEntry,
    LoggedExerciseInput,
    LoggedSet,
    WorkoutLog,
    WorkoutLogPayload,
)

__all__ = [
    # Base
    "CamelModel",
    "PayloadModel",
    "describe_first_error",
    "is_valid_id",
    # Enums
    "Difficulty",
    "DurationBucket",
    "Equipment",
    "MuscleGroup",
    "RoutineCategory",
    # Exercise
    "Exercise",
    "ExerciseCreate",
    "RecentExercise",
    # Query
    "DateRange",
    "ExerciseFilters",
    "Page",
    "PageRequest",
    "RoutineFilters",
    "as_utc",
    "page_count",
    # Routine
    "Routine",
    "RoutineExerciseEntry",
    "RoutinePayload",
    "SetEntry",
    "WorkoutExerciseInput",
    # Stats
    "CatalogBreakdown",
    "CatalogStats",
    "GroupCount",
    "RecentRoutine",
    "RoutineBreakdown",
    "RoutineStats",
    # Workout log
    "LoggedExerciseEntry",
    "LoggedExerciseInput",
    "LoggedSet",
    "WorkoutLog",
    "WorkoutLogPayload",
]
