"""
Workout Log Book Use Case.

Append-only history of performed sessions. A log stores its own copy of the
exercises and sets performed, so editing or deleting the routine afterwards
never changes it.
"""
import logging
from datetime import datetime, timezone

from application.ports import WorkoutLogRepository
from application.use_cases.resolve_references import ReferenceResolver
from domain.models import DateRange, Page, PageRequest, WorkoutLog, WorkoutLogPayload

logger = logging.getLogger(__name__)


class WorkoutLogBook:
    """Use case for recording and listing workout logs."""

    def __init__(self, workout_log_repo: WorkoutLogRepository, resolver: ReferenceResolver):
        self._workout_log_repo = workout_log_repo
        self._resolver = resolver

    def list(self, owner_id: str, created: DateRange, page: PageRequest) -> Page[WorkoutLog]:
        """
        List the owner's logs created within ``created``, newest first.

        Args:
            owner_id: Current user ID
            created: Inclusive creation-time bounds, either side optional
            page: Requested page

        Returns:
            Page of logs with routine and exercise references resolved
        """
        rows, total = self._workout_log_repo.get_page_for_owner(
            owner_id,
            created,
            offset=page.offset,
            limit=page.limit,
        )
        return Page(items=self._resolver.workout_logs(rows, owner_id), total=total, request=page)

    def create(self, owner_id: str, payload: WorkoutLogPayload) -> WorkoutLog:
        record = payload.to_record()
        record["owner_id"] = owner_id
        if record["start_time"] is None:
            record["start_time"] = datetime.now(timezone.utc).isoformat()
        row = self._workout_log_repo.create(record)
        logger.info("Workout log created: %s by %s", row.get("id"), owner_id)
        return self._resolver.workout_logs([row], owner_id)[0]
