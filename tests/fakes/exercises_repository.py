"""
Fake ExercisesRepository for testing.

This module provides an in-memory fake implementation of ExercisesRepository
for unit testing without database access.
"""
from typing import Optional, List, Dict, Any, Sequence, Tuple
from datetime import datetime, timezone
import copy
import itertools
import uuid

from domain.models import ExerciseFilters

FACET_KEYS = ("muscle_groups", "equipment", "difficulty")
RECENT_KEYS = ("id", "name", "difficulty", "muscle_groups", "created_at")


class FakeExercisesRepository:
    """
    In-memory fake implementation of ExercisesRepository for testing.

    Records are returned as deep copies so callers cannot mutate stored
    state. Ordering is newest first, with insertion order breaking ties.

    Usage:
        repo = FakeExercisesRepository()
        repo.seed([{"name": "Sentadillas", "muscle_groups": ["legs"]}])
    """

    def __init__(self, exercises: Optional[List[Dict[str, Any]]] = None):
        self._exercises: Dict[str, Dict[str, Any]] = {}
        self._sequence: Dict[str, int] = {}
        self._counter = itertools.count()
        self.fail_create_many_after: Optional[int] = None
        if exercises:
            self.seed(exercises)

    def reset(self) -> None:
        """Clear all stored exercises."""
        self._exercises.clear()
        self._sequence.clear()

    def seed(self, exercises: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Seed the repository with test data.

        Missing ``id`` and timestamps are generated.
        """
        return [self._store(exercise) for exercise in exercises]

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all stored exercises, newest first (test helper)."""
        return [copy.deepcopy(e) for e in self._ordered()]

    def _store(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        exercise_id = data.get("id") or str(uuid.uuid4())
        record = {
            "description": None,
            "muscle_groups": [],
            "equipment": [],
            "difficulty": "beginner",
            "instructions": [],
            "tips": [],
            "image_url": None,
            "video_url": None,
            "created_at": now,
            "updated_at": now,
            **copy.deepcopy(data),
            "id": exercise_id,
        }
        self._exercises[exercise_id] = record
        self._sequence[exercise_id] = next(self._counter)
        return copy.deepcopy(record)

    def _ordered(self) -> List[Dict[str, Any]]:
        return sorted(
            self._exercises.values(),
            key=lambda e: (e.get("created_at") or "", self._sequence[e["id"]]),
            reverse=True,
        )

    # =========================================================================
    # ExercisesRepository Protocol Methods
    # =========================================================================

    def get_page(
        self,
        filters: ExerciseFilters,
        *,
        offset: int,
        limit: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        matches = [e for e in self._ordered() if filters.matches(e)]
        return [copy.deepcopy(e) for e in matches[offset:offset + limit]], len(matches)

    def get_by_id(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        exercise = self._exercises.get(exercise_id)
        return copy.deepcopy(exercise) if exercise else None

    def get_by_ids(self, exercise_ids: Sequence[str]) -> List[Dict[str, Any]]:
        return [
            copy.deepcopy(self._exercises[i])
            for i in dict.fromkeys(exercise_ids)
            if i in self._exercises
        ]

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._store(data)

    def create_many(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Insert rows one by one.

        Set ``fail_create_many_after`` to simulate a store fault part-way
        through the batch.
        """
        created = []
        for index, row in enumerate(rows):
            if self.fail_create_many_after is not None and index >= self.fail_create_many_after:
                raise RuntimeError("simulated store failure")
            created.append(self._store(row))
        return created

    def count(self) -> int:
        return len(self._exercises)

    def get_facets(self) -> List[Dict[str, Any]]:
        return [
            {key: copy.deepcopy(e.get(key)) for key in FACET_KEYS}
            for e in self._exercises.values()
        ]

    def get_recent(self, limit: int = 5) -> List[Dict[str, Any]]:
        named = [e for e in self._ordered() if e.get("name")]
        return [
            {key: copy.deepcopy(e.get(key)) for key in RECENT_KEYS}
            for e in named[:limit]
        ]
