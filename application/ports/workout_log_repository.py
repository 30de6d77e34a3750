"""
Workout Log Repository Interface (Port).

Workout logs are append-only: the port exposes no update or delete.
"""
from typing import Any, Dict, List, Protocol, Tuple

from domain.models import DateRange


class WorkoutLogRepository(Protocol):
    """Abstract interface for workout log persistence."""

    def get_page_for_owner(
        self,
        owner_id: str,
        created: DateRange,
        *,
        offset: int,
        limit: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        """
        Get one page of the owner's logs, newest first.

        Args:
            owner_id: Owner of the logs
            created: Inclusive bounds on ``created_at`` (either side optional)
            offset: Number of matches to skip
            limit: Maximum number of matches to return

        Returns:
            Tuple of (page of log records, total number of matches)
        """
        ...

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a log and return the stored record."""
        ...
