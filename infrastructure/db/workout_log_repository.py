"""
Supabase implementation of WorkoutLogRepository.

Logs live in the ``workout_logs`` table with performed exercises embedded as
jsonb. The table is append-only from this service's point of view.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

from supabase import Client

from domain.models import DateRange, as_utc
from infrastructure.db.store_errors import store_call

logger = logging.getLogger(__name__)

TABLE = "workout_logs"


class SupabaseWorkoutLogRepository:
    """Supabase implementation of WorkoutLogRepository protocol."""

    def __init__(self, client: Client):
        self._client = client

    def get_page_for_owner(
        self,
        owner_id: str,
        created: DateRange,
        *,
        offset: int,
        limit: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        with store_call("list workout logs"):
            query = (
                self._client.table(TABLE)
                .select("*", count="exact")
                .eq("owner_id", owner_id)
            )
            if created.start is not None:
                query = query.gte("created_at", as_utc(created.start).isoformat())
            if created.end is not None:
                query = query.lte("created_at", as_utc(created.end).isoformat())
            result = (
                query.order("created_at", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
        return result.data or [], result.count or 0

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        with store_call("insert workout log"):
            result = (
                self._client.table(TABLE)
                .insert({**data, "created_at": now, "updated_at": now})
                .execute()
            )
        return result.data[0]
