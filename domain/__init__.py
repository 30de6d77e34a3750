"""
Domain layer for the routine service.

This package contains pure domain models and reference data that are
independent of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    Exercise,
    ExerciseCreate,
    Routine,
    RoutinePayload,
    WorkoutLog,
    WorkoutLogPayload,
)

__all__ = [
    "Exercise",
    "ExerciseCreate",
    "Routine",
    "RoutinePayload",
    "WorkoutLog",
    "WorkoutLogPayload",
]
