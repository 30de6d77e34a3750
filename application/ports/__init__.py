"""
Repository Interfaces (Ports) for the routine service.

This package defines abstract interfaces that decouple the use cases from
infrastructure (database). Implementations are provided in the
infrastructure layer and, for tests, in tests/fakes.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import RoutineRepository

    class RoutineManager:
        def __init__(self, routine_repo: RoutineRepository):
            self._routine_repo = routine_repo
"""

from application.ports.exercises_repository import ExercisesRepository
from application.ports.routine_repository import RoutineRepository
from application.ports.workout_log_repository import WorkoutLogRepository

__all__ = [
    "ExercisesRepository",
    "RoutineRepository",
    "WorkoutLogRepository",
]
