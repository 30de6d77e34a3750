"""
Reference resolution for routines and workout logs.

Routines and logs store only the ids of the exercises (and, for logs, the
routine) they refer to. Before a response leaves the service every id is
replaced by the referenced document. Each call issues at most one batch
fetch per referenced collection, however many rows are resolved.
"""
import logging
from typing import Dict, List, Optional

from application.ports import ExercisesRepository, RoutineRepository
from domain.converters import (
    db_row_to_exercise,
    db_row_to_routine,
    db_row_to_workout_log,
    referenced_exercise_ids,
)
from domain.models import Exercise, Routine, WorkoutLog, is_valid_id

logger = logging.getLogger(__name__)


class ReferenceResolver:
    """
    Resolves exercise and routine references in stored rows.

    Dangling or malformed references resolve to None; they never fail the
    read.
    """

    def __init__(
        self,
        exercises_repo: ExercisesRepository,
        routine_repo: Optional[RoutineRepository] = None,
    ):
        self._exercises_repo = exercises_repo
        self._routine_repo = routine_repo

    def exercise_index(self, rows: List[dict]) -> Dict[str, Exercise]:
        """Fetch every exercise referenced by ``rows`` in one batch, keyed by id."""
        ids = [i for i in referenced_exercise_ids(rows) if is_valid_id(i)]
        if not ids:
            return {}
        found = self._exercises_repo.get_by_ids(ids)
        return {str(row["id"]): db_row_to_exercise(row) for row in found}

    def routines(self, rows: List[dict]) -> List[Routine]:
        exercises = self.exercise_index(rows)
        return [db_row_to_routine(row, exercises) for row in rows]

    def routine(self, row: dict) -> Routine:
        return self.routines([row])[0]

    def visible_routine_rows(
        self,
        routine_ids: List[str],
        caller_id: str,
    ) -> Dict[str, dict]:
        """
        Fetch the routine rows the caller may see (own or public), keyed by id.
        """
        if self._routine_repo is None:
            raise RuntimeError("ReferenceResolver was built without a routine repository")
        ids = list(dict.fromkeys(i for i in routine_ids if is_valid_id(i)))
        if not ids:
            return {}
        return {
            str(row["id"]): row
            for row in self._routine_repo.get_by_ids(ids)
            if row.get("owner_id") == caller_id or row.get("is_public")
        }

    def workout_logs(self, rows: List[dict], caller_id: str) -> List[WorkoutLog]:
        """
        Resolve logs together with their routines.

        The exercises referenced by the logs and by the attached routines are
        fetched in the same batch.
        """
        routine_rows = self.visible_routine_rows(
            [str(row.get("routine_id") or "") for row in rows],
            caller_id,
        )
        exercises = self.exercise_index(rows + list(routine_rows.values()))
        routines = {
            routine_id: db_row_to_routine(row, exercises)
            for routine_id, row in routine_rows.items()
        }
        return [
            db_row_to_workout_log(row, exercises, routines.get(str(row.get("routine_id"))))
            for row in rows
        ]
