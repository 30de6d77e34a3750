"""
Unit tests for the database row converters.
"""

import pytest

from domain.converters import (
    db_row_to_routine,
    db_row_to_workout_log,
    referenced_exercise_ids,
)
from domain.models import Exercise, Routine

pytestmark = pytest.mark.unit

SQUAT_ID = "11111111-1111-1111-1111-111111111111"
PLANK_ID = "22222222-2222-2222-2222-222222222222"
MISSING_ID = "33333333-3333-3333-3333-333333333333"

EXERCISES = {
    SQUAT_ID: Exercise(id=SQUAT_ID, name="Sentadillas", muscle_groups=["legs"]),
    PLANK_ID: Exercise(id=PLANK_ID, name="Plancha", muscle_groups=["core"]),
}

ROUTINE_ROW = {
    "id": "44444444-4444-4444-4444-444444444444",
    "name": "Pierna y core",
    "owner_id": "user-1",
    "category": "strength",
    "difficulty": "beginner",
    "estimated_duration": 40,
    "is_public": False,
    "is_active": True,
    "tags": None,
    "equipment": None,
    "exercises": [
        {"exercise_id": PLANK_ID, "sets": [{"duration": 60}], "notes": None, "order": 1},
        {"exercise_id": SQUAT_ID, "sets": [{"reps": 10, "weight": 40}], "notes": "profundo", "order": 0},
        {"exercise_id": MISSING_ID, "sets": None, "notes": None, "order": 2},
    ],
    "created_at": "2024-01-01T12:00:00+00:00",
    "updated_at": "2024-01-01T12:00:00+00:00",
}


class TestReferencedExerciseIds:
    """Distinct ids across rows, first-seen order."""

    def test_collects_distinct_ids(self):
        rows = [ROUTINE_ROW, {"exercises": [{"exercise_id": SQUAT_ID}, {"exercise_id": None}]}]
        assert referenced_exercise_ids(rows) == [PLANK_ID, SQUAT_ID, MISSING_ID]

    def test_rows_without_entries(self):
        assert referenced_exercise_ids([{"exercises": None}, {}]) == []


class TestDbRowToRoutine:
    """Routine rows are resolved against a prefetched exercise index."""

    def test_entries_resolved_in_stored_sequence(self):
        routine = db_row_to_routine(ROUTINE_ROW, EXERCISES)
        assert [e.exercise_id for e in routine.exercises] == [PLANK_ID, SQUAT_ID, MISSING_ID]
        assert [e.order for e in routine.exercises] == [1, 0, 2]
        assert routine.exercises[1].exercise.name == "Sentadillas"
        assert routine.exercises[1].sets[0].reps == 10

    def test_dangling_reference_resolves_to_none(self):
        routine = db_row_to_routine(ROUTINE_ROW, EXERCISES)
        assert routine.exercises[2].exercise is None
        assert routine.exercises[2].sets == []

    def test_null_lists_become_empty(self):
        routine = db_row_to_routine(ROUTINE_ROW, {})
        assert routine.tags == []
        assert routine.equipment == []

    def test_wire_shape(self):
        data = db_row_to_routine(ROUTINE_ROW, EXERCISES).model_dump(by_alias=True, mode="json")
        assert data["ownerId"] == "user-1"
        assert data["estimatedDuration"] == 40
        entry = data["exercises"][0]
        assert set(entry) == {"exerciseId", "exercise", "sets", "notes", "order"}
        assert entry["exercise"]["muscleGroups"] == ["core"]


class TestDbRowToWorkoutLog:
    """Workout log rows."""

    LOG_ROW = {
        "id": "55555555-5555-5555-5555-555555555555",
        "owner_id": "user-1",
        "routine_id": ROUTINE_ROW["id"],
        "exercises": [{"exercise_id": SQUAT_ID, "sets": [{"reps": 8, "completed": True}], "notes": None}],
        "start_time": "2024-01-02T08:00:00+00:00",
        "duration": 50,
        "rating": 4,
        "created_at": "2024-01-02T09:00:00+00:00",
    }

    def test_full_routine_attached(self):
        routine = db_row_to_routine(ROUTINE_ROW, EXERCISES)
        log = db_row_to_workout_log(self.LOG_ROW, EXERCISES, routine)
        assert isinstance(log.routine, Routine)
        assert log.routine.name == "Pierna y core"
        assert log.routine.owner_id == "user-1"
        assert log.routine.exercises[1].exercise.name == "Sentadillas"
        assert log.exercises[0].exercise.name == "Sentadillas"
        assert log.exercises[0].sets[0].completed is True

    def test_routine_defaults_to_none(self):
        log = db_row_to_workout_log(self.LOG_ROW, {})
        assert log.routine is None
        assert log.routine_id == ROUTINE_ROW["id"]
        assert log.exercises[0].exercise is None
