"""
Infrastructure Layer for the routine service.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseExercisesRepository,
    SupabaseRoutineRepository,
    SupabaseWorkoutLogRepository,
)

__all__ = [
    "SupabaseExercisesRepository",
    "SupabaseRoutineRepository",
    "SupabaseWorkoutLogRepository",
]
