"""
Routine Repository Interface (Port).

Routines are owned documents. Every mutating method takes the owner id and
only touches a routine whose ``owner_id`` matches, so ownership is enforced
by the query itself rather than by a separate read.
"""
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple

from domain.models import RoutineFilters


class RoutineRepository(Protocol):
    """Abstract interface for routine persistence."""

    def get_page_for_owner(
        self,
        owner_id: str,
        filters: RoutineFilters,
        *,
        offset: int,
        limit: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        """
        Get one page of the owner's active routines, newest first.

        Only routines with ``is_active`` set are returned.

        Returns:
            Tuple of (page of routine records, total number of matches)
        """
        ...

    def get_all_for_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        """Get every active routine of the owner, newest first."""
        ...

    def get_public(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Get up to ``limit`` public routines of any owner, newest first."""
        ...

    def get_by_id(self, routine_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a routine by id regardless of owner.

        Visibility rules are applied by the caller.
        """
        ...

    def get_by_ids(self, routine_ids: Sequence[str]) -> List[Dict[str, Any]]:
        """Batch fetch routines by id. Unknown ids are skipped."""
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a routine and return the stored record."""
        ...

    def update_owned(
        self,
        routine_id: str,
        owner_id: str,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        """
        Replace the mutable fields of a routine owned by ``owner_id``.

        Returns:
            Updated record, or None if no routine with that id and owner exists
        """
        ...

    def delete_owned(self, routine_id: str, owner_id: str) -> Optional[Dict[str, Any]]:
        """
        Hard-delete a routine owned by ``owner_id``.

        Returns:
            The deleted record, or None if no routine with that id and owner exists
        """
        ...
