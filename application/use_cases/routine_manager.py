"""
Routine Manager Use Case.

Routines are owned by the subject that created them. The owner can always
read them; anyone can read a public one. Only the owner can update or delete.
A routine the caller may not see is reported exactly like a missing one.
"""
import logging
from typing import List, Optional

from application.exceptions import NotFoundError
from application.ports import RoutineRepository
from application.use_cases.resolve_references import ReferenceResolver
from domain.aggregations import summarize_routines
from domain.converters import db_row_to_routine
from domain.models import (
    Page,
    PageRequest,
    Routine,
    RoutineFilters,
    RoutinePayload,
    RoutineStats,
    is_valid_id,
)

logger = logging.getLogger(__name__)


class RoutineManager:
    """Use case for user-owned routines."""

    def __init__(self, routine_repo: RoutineRepository, resolver: ReferenceResolver):
        """
        Initialize with required dependencies.

        Args:
            routine_repo: Repository for routine persistence
            resolver: Resolves exercise references before routines are returned
        """
        self._routine_repo = routine_repo
        self._resolver = resolver

    def list(self, owner_id: str, filters: RoutineFilters, page: PageRequest) -> Page[Routine]:
        """List the owner's active routines matching all filters, newest first."""
        rows, total = self._routine_repo.get_page_for_owner(
            owner_id,
            filters,
            offset=page.offset,
            limit=page.limit,
        )
        return Page(items=self._resolver.routines(rows), total=total, request=page)

    def list_popular(self, limit: int) -> List[Routine]:
        """Up to ``limit`` public routines of any owner, newest first."""
        return self._resolver.routines(self._routine_repo.get_public(limit=limit))

    def get(self, routine_id: str, caller_id: str) -> Routine:
        """
        Get a routine visible to the caller.

        Raises:
            NotFoundError: If the routine does not exist, or is private and
                owned by someone else
        """
        row = self._find(routine_id)
        if row is None or not (row.get("owner_id") == caller_id or row.get("is_public")):
            raise NotFoundError("Routine")
        return self._resolver.routine(row)

    def create(self, owner_id: str, payload: RoutinePayload) -> Routine:
        record = payload.to_record()
        record["owner_id"] = owner_id
        record["is_active"] = True
        row = self._routine_repo.create(record)
        logger.info("Routine created: %s by %s", row.get("id"), owner_id)
        return self._resolver.routine(row)

    def update(self, routine_id: str, owner_id: str, payload: RoutinePayload) -> Routine:
        """
        Replace every mutable field of an owned routine.

        Omitted optional fields fall back to their defaults. Owner, active
        flag and creation time are kept.

        Raises:
            NotFoundError: If no routine with that id is owned by the caller
        """
        row = None
        if is_valid_id(routine_id):
            row = self._routine_repo.update_owned(routine_id, owner_id, payload.to_record())
        if row is None:
            raise NotFoundError("Routine")
        logger.info("Routine updated: %s by %s", routine_id, owner_id)
        return self._resolver.routine(row)

    def delete(self, routine_id: str, owner_id: str) -> None:
        """
        Hard-delete an owned routine. Repeating the call raises NotFoundError.
        """
        deleted = None
        if is_valid_id(routine_id):
            deleted = self._routine_repo.delete_owned(routine_id, owner_id)
        if deleted is None:
            logger.warning("Routine delete refused: %s by %s (not found or not owned)", routine_id, owner_id)
            raise NotFoundError("Routine")
        logger.info("Routine deleted: %s by %s", routine_id, owner_id)

    def summary(self, owner_id: str) -> RoutineStats:
        """Dashboard summary over all of the owner's active routines."""
        rows = self._routine_repo.get_all_for_owner(owner_id)
        return summarize_routines([db_row_to_routine(row, {}) for row in rows])

    def _find(self, routine_id: str) -> Optional[dict]:
        if not is_valid_id(routine_id):
            return None
        return self._routine_repo.get_by_id(routine_id)
