"""
Application Use Cases for the routine service.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models and raise application exceptions

Usage:
    from application.use_cases import ExerciseCatalog, ReferenceResolver, RoutineManager

    resolver = ReferenceResolver(exercises_repo, routine_repo)
    routines = RoutineManager(routine_repo=routine_repo, resolver=resolver)
    page = routines.list("user-123", RoutineFilters(), PageRequest(page=1, limit=10))
"""

from application.use_cases.exercise_catalog import ExerciseCatalog
from application.use_cases.resolve_references import ReferenceResolver
from application.use_cases.routine_manager import RoutineManager
from application.use_cases.workout_log_book import WorkoutLogBook

__all__ = [
    "ExerciseCatalog",
    "ReferenceResolver",
    "RoutineManager",
    "WorkoutLogBook",
]
