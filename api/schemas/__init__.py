"""
Pydantic schemas for API requests and responses.

Domain models (domain.models) are returned directly for single entities;
the envelopes here wrap lists, pages and bulk results.
"""

from api.schemas.envelopes import (
    BulkExercisesRequest,
    ExerciseBatchResponse,
    ExerciseListResponse,
    MessageResponse,
    PaginatedResponse,
    PopularRoutinesResponse,
    RoutineListResponse,
    WorkoutLogListResponse,
)

__all__ = [
    "BulkExercisesRequest",
    "ExerciseBatchResponse",
    "ExerciseListResponse",
    "MessageResponse",
    "PaginatedResponse",
    "PopularRoutinesResponse",
    "RoutineListResponse",
    "WorkoutLogListResponse",
]
