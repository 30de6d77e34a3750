"""
Exercises Repository Interface (Port).

This module defines the abstract interface for the shared exercise catalog.
Implementations may use Supabase or an in-memory store.
"""
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from domain.models import ExerciseFilters


class ExercisesRepository(Protocol):
    """
    Abstract interface for the exercise catalog.

    Records are plain dictionaries with snake_case keys and always carry
    ``id``, ``created_at`` and ``updated_at`` once stored.
    """

    def get_page(
        self,
        filters: ExerciseFilters,
        *,
        offset: int,
        limit: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        """
        Get one page of exercises matching all filters, newest first.

        Args:
            filters: Filters combined with AND semantics
            offset: Number of matches to skip
            limit: Maximum number of matches to return

        Returns:
            Tuple of (page of exercise records, total number of matches)
        """
        ...

    def get_by_id(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        """
        Get an exercise by id.

        Returns:
            Exercise record or None if not found
        """
        ...

    def get_by_ids(self, exercise_ids: Sequence[str]) -> List[Dict[str, Any]]:
        """
        Batch fetch exercises by id. Unknown ids are silently skipped.

        Args:
            exercise_ids: Ids to fetch (duplicates allowed)

        Returns:
            Exercise records found, in no particular order
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one exercise and return the stored record."""
        ...

    def create_many(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Insert several exercises in a single request.

        Not transactional: a failure part-way through may leave some rows
        stored. Callers validate every row before calling this.
        """
        ...

    def count(self) -> int:
        """Total number of exercises in the catalog."""
        ...

    def get_facets(self) -> List[Dict[str, Any]]:
        """
        Get the aggregation fields of every exercise.

        Returns:
            Records holding at least ``muscle_groups``, ``equipment`` and
            ``difficulty``
        """
        ...

    def get_recent(self, limit: int = 5) -> List[Dict[str, Any]]:
        """
        Get the most recently created exercises that have a non-empty name.

        Returns:
            Records with ``id``, ``name``, ``difficulty``, ``muscle_groups``
            and ``created_at``, newest first
        """
        ...
