"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeRoutineRepository, create_routine_repo

    # Direct instantiation
    repo = FakeRoutineRepository()
    repo.seed([{"owner_id": "user1", "name": "Full body"}])

    # Factory function with pre-populated data
    repo = create_routine_repo(owner_id="user1", num_routines=5)
"""
from typing import Optional, Dict, Any, List
from datetime import datetime, timedelta, timezone

from domain.default_exercises import DEFAULT_EXERCISES
from tests.fakes.exercises_repository import FakeExercisesRepository
from tests.fakes.routine_repository import FakeRoutineRepository
from tests.fakes.workout_log_repository import FakeWorkoutLogRepository

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def minutes_after_base(minutes: int) -> str:
    """ISO timestamp ``minutes`` after BASE_TIME, for deterministic ordering."""
    return (BASE_TIME + timedelta(minutes=minutes)).isoformat()


# =============================================================================
# Factory Functions
# =============================================================================


def create_exercises_repo(
    *,
    exercises: Optional[List[Dict[str, Any]]] = None,
    with_defaults: bool = False,
) -> FakeExercisesRepository:
    """
    Create a FakeExercisesRepository.

    Args:
        exercises: Optional list of exercises to store
        with_defaults: Store the default catalog as well

    Returns:
        Pre-populated FakeExercisesRepository
    """
    repo = FakeExercisesRepository()
    if with_defaults:
        repo.seed(DEFAULT_EXERCISES)
    if exercises:
        repo.seed(exercises)
    return repo


def create_routine_repo(
    *,
    owner_id: str = "test_user",
    num_routines: int = 0,
    is_public: bool = False,
) -> FakeRoutineRepository:
    """
    Create a FakeRoutineRepository with optional pre-populated routines.

    Routine ``i`` is created ``i`` minutes after BASE_TIME, so the last one
    is the newest.

    Args:
        owner_id: Owner of the generated routines
        num_routines: Number of sample routines to create
        is_public: Visibility of the generated routines

    Returns:
        Pre-populated FakeRoutineRepository
    """
    repo = FakeRoutineRepository()

    if num_routines > 0:
        repo.seed([
            {
                "owner_id": owner_id,
                "name": f"Test Routine {i + 1}",
                "is_public": is_public,
                "estimated_duration": 20 + i * 15,
                "created_at": minutes_after_base(i),
                "updated_at": minutes_after_base(i),
            }
            for i in range(num_routines)
        ])

    return repo


def create_workout_log_repo(
    *,
    owner_id: str = "test_user",
    routine_id: str = "00000000-0000-0000-0000-000000000000",
    num_logs: int = 0,
) -> FakeWorkoutLogRepository:
    """
    Create a FakeWorkoutLogRepository with one log per day starting at BASE_TIME.

    Args:
        owner_id: Owner of the generated logs
        routine_id: Routine referenced by every log
        num_logs: Number of sample logs to create

    Returns:
        Pre-populated FakeWorkoutLogRepository
    """
    repo = FakeWorkoutLogRepository()

    if num_logs > 0:
        repo.seed([
            {
                "owner_id": owner_id,
                "routine_id": routine_id,
                "duration": 45,
                "created_at": minutes_after_base(i * 24 * 60),
            }
            for i in range(num_logs)
        ])

    return repo


__all__ = [
    # Fake implementations
    "FakeExercisesRepository",
    "FakeRoutineRepository",
    "FakeWorkoutLogRepository",
    # Factory functions
    "create_exercises_repo",
    "create_routine_repo",
    "create_workout_log_repo",
    # Helpers
    "BASE_TIME",
    "minutes_after_base",
]
