"""
FastAPI Dependency Providers for the routine service.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with in-memory fakes.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- Auth providers come from backend.auth

Usage in routers:
    from api.deps import get_routine_manager, get_current_user
    from application.use_cases import RoutineManager

    @router.get("/routines/{routine_id}")
    def get_routine(
        routine_id: str,
        user_id: str = Depends(get_current_user),
        routines: RoutineManager = Depends(get_routine_manager),
    ):
        return routines.get(routine_id, user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_routine_repo] = lambda: FakeRoutineRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, ClientOptions, create_client

# Protocol types (interfaces)
from application.ports import (
    ExercisesRepository,
    RoutineRepository,
    WorkoutLogRepository,
)
from application.use_cases import (
    ExerciseCatalog,
    ReferenceResolver,
    RoutineManager,
    WorkoutLogBook,
)

# Concrete implementations
from infrastructure import (
    SupabaseExercisesRepository,
    SupabaseRoutineRepository,
    SupabaseWorkoutLogRepository,
)

from backend.settings import Settings, get_settings
from backend.auth import IdentityClaims, get_current_claims, get_current_user


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings. Every
    PostgREST request made through it is bounded by
    ``settings.store_timeout_seconds``.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = get_settings()

    if not settings.store_configured:
        return None

    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(postgrest_client_timeout=settings.store_timeout_seconds),
    )


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_exercises_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExercisesRepository:
    """
    Get exercise catalog repository.

    Returns:
        ExercisesRepository: Implementation of exercise catalog
    """
    return SupabaseExercisesRepository(client)


def get_routine_repo(
    client: Client = Depends(get_supabase_client_required),
) -> RoutineRepository:
    """
    Get routine repository.

    Returns:
        RoutineRepository: Implementation of routine persistence
    """
    return SupabaseRoutineRepository(client)


def get_workout_log_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutLogRepository:
    """
    Get workout log repository.

    Returns:
        WorkoutLogRepository: Implementation of workout log persistence
    """
    return SupabaseWorkoutLogRepository(client)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_reference_resolver(
    exercises_repo: ExercisesRepository = Depends(get_exercises_repo),
    routine_repo: RoutineRepository = Depends(get_routine_repo),
) -> ReferenceResolver:
    return ReferenceResolver(exercises_repo, routine_repo)


def get_exercise_catalog(
    exercises_repo: ExercisesRepository = Depends(get_exercises_repo),
) -> ExerciseCatalog:
    return ExerciseCatalog(exercises_repo)


def get_routine_manager(
    routine_repo: RoutineRepository = Depends(get_routine_repo),
    resolver: ReferenceResolver = Depends(get_reference_resolver),
) -> RoutineManager:
    return RoutineManager(routine_repo=routine_repo, resolver=resolver)


def get_workout_log_book(
    workout_log_repo: WorkoutLogRepository = Depends(get_workout_log_repo),
    resolver: ReferenceResolver = Depends(get_reference_resolver),
) -> WorkoutLogBook:
    return WorkoutLogBook(workout_log_repo=workout_log_repo, resolver=resolver)


__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_exercises_repo",
    "get_routine_repo",
    "get_workout_log_repo",
    # Use cases
    "get_reference_resolver",
    "get_exercise_catalog",
    "get_routine_manager",
    "get_workout_log_book",
    # Authentication
    "IdentityClaims",
    "get_current_claims",
    "get_current_user",
]
