"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports. These implementations are injected
into the use cases by api.deps.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseExercisesRepository,
        SupabaseRoutineRepository,
        SupabaseWorkoutLogRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    exercises_repo = SupabaseExercisesRepository(client)
    routine_repo = SupabaseRoutineRepository(client)
    workout_log_repo = SupabaseWorkoutLogRepository(client)
"""

from infrastructure.db.exercises_repository import SupabaseExercisesRepository
from infrastructure.db.routine_repository import SupabaseRoutineRepository
from infrastructure.db.store_errors import store_call
from infrastructure.db.workout_log_repository import SupabaseWorkoutLogRepository

__all__ = [
    # Exercise catalog
    "SupabaseExercisesRepository",

    # Routines
    "SupabaseRoutineRepository",

    # Workout logs
    "SupabaseWorkoutLogRepository",

    # Error translation
    "store_call",
]
