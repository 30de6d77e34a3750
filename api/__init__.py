"""
API package for the routine service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- schemas/: Response envelopes shared by the routers
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_exercises_repo,
    get_routine_repo,
    get_workout_log_repo,
    get_exercise_catalog,
    get_routine_manager,
    get_workout_log_book,
    get_current_user,
    get_current_claims,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_exercises_repo",
    "get_routine_repo",
    "get_workout_log_repo",
    # Use cases
    "get_exercise_catalog",
    "get_routine_manager",
    "get_workout_log_book",
    # Authentication
    "get_current_user",
    "get_current_claims",
]
