"""
Domain converters for turning stored rows into domain models.

All converters are pure functions with no side effects. Reference
resolution is done by the caller, which passes in the exercises it fetched.

Usage:
    from domain.converters import db_row_to_exercise, db_row_to_routine, referenced_exercise_ids

    ids = referenced_exercise_ids(rows)
    exercises = {e.id: e for e in map(db_row_to_exercise, repo.get_by_ids(ids))}
    routines = [db_row_to_routine(row, exercises) for row in rows]
"""

from domain.converters.db_converters import (
    db_row_to_exercise,
    db_row_to_recent_exercise,
    db_row_to_routine,
    db_row_to_workout_log,
    referenced_exercise_ids,
)

__all__ = [
    "db_row_to_exercise",
    "db_row_to_recent_exercise",
    "db_row_to_routine",
    "db_row_to_workout_log",
    "referenced_exercise_ids",
]
