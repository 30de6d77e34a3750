"""
Converters: Database row format -> domain models.

Rows come back from the store with snake_case keys and embedded jsonb
entries. Routine and workout log entries only carry ``exercise_id``; the
caller passes in the exercises it fetched in one batch so each entry can be
resolved without another round trip.

Database schema (routines table):
- id: UUID
- owner_id: Subject id from the access token
- name, description, tags, difficulty, category, equipment
- exercises: JSONB list of {exercise_id, sets, notes, order}
- estimated_duration: Minutes
- is_public, is_active: Visibility flags
- created_at, updated_at: Timestamps

Database schema (workout_logs table):
- id: UUID
- owner_id, routine_id
- exercises: JSONB list of {exercise_id, sets, notes}
- start_time, end_time, duration, notes, rating
- created_at, updated_at: Timestamps
"""

from typing import Any, Dict, List, Mapping, Optional

from domain.models import (
    Exercise,
    LoggedExerciseEntry,
    RecentExercise,
    Routine,
    RoutineExerciseEntry,
    WorkoutLog,
)

ExerciseIndex = Mapping[str, Exercise]


def referenced_exercise_ids(rows: List[Dict[str, Any]]) -> List[str]:
    """
    Collect the distinct exercise ids referenced by routine or log rows.

    Examples:
        >>> referenced_exercise_ids([{"exercises": [{"exercise_id": "a"}, {"exercise_id": "a"}]}])
        ['a']
    """
    seen: Dict[str, None] = {}
    for row in rows:
        for entry in row.get("exercises") or []:
            exercise_id = entry.get("exercise_id")
            if exercise_id:
                seen.setdefault(str(exercise_id), None)
    return list(seen)


def db_row_to_exercise(row: Dict[str, Any]) -> Exercise:
    return Exercise.model_validate(row)


def db_row_to_recent_exercise(row: Dict[str, Any]) -> RecentExercise:
    return RecentExercise.model_validate(row)


def _resolve_entries(
    entries: Optional[List[Dict[str, Any]]],
    exercises: ExerciseIndex,
) -> List[Dict[str, Any]]:
    resolved = []
    for entry in entries or []:
        exercise_id = str(entry.get("exercise_id") or "")
        resolved.append({**entry, "exercise_id": exercise_id, "exercise": exercises.get(exercise_id)})
    return resolved


def db_row_to_routine(row: Dict[str, Any], exercises: ExerciseIndex) -> Routine:
    """
    Convert a routines row to a Routine with its entries resolved.

    Entries whose exercise is not in ``exercises`` get ``exercise=None``.
    Entries keep their stored sequence; ``order`` is returned as data.
    """
    entries = [
        RoutineExerciseEntry.model_validate(entry)
        for entry in _resolve_entries(row.get("exercises"), exercises)
    ]
    return Routine.model_validate({**row, "exercises": entries})


def db_row_to_workout_log(
    row: Dict[str, Any],
    exercises: ExerciseIndex,
    routine: Optional[Routine] = None,
) -> WorkoutLog:
    entries = [
        LoggedExerciseEntry.model_validate(entry)
        for entry in _resolve_entries(row.get("exercises"), exercises)
    ]
    return WorkoutLog.model_validate({**row, "exercises": entries, "routine": routine})
