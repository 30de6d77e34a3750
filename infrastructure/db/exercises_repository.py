"""
Supabase implementation of ExercisesRepository.

This module provides the concrete Supabase implementation for the shared
exercise catalog (``exercises`` table). List columns (muscle_groups,
equipment, instructions, tips) are Postgres text arrays.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from supabase import Client

from domain.models import ExerciseFilters
from infrastructure.db.store_errors import store_call

logger = logging.getLogger(__name__)

TABLE = "exercises"

# PostgREST caps unbounded selects; facet scans are paged in chunks of this size.
FACET_CHUNK_SIZE = 1000

FACET_COLUMNS = "muscle_groups, equipment, difficulty"
RECENT_COLUMNS = "id, name, difficulty, muscle_groups, created_at"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SupabaseExercisesRepository:
    """
    Supabase implementation of ExercisesRepository protocol.

    Filters are pushed down to PostgREST:
    - muscle group / equipment: array containment
    - difficulty: equality
    - search: case-insensitive substring match on name
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def _apply_filters(self, query, filters: ExerciseFilters):
        if filters.muscle_group:
            query = query.contains("muscle_groups", [filters.muscle_group.value])
        if filters.equipment:
            query = query.contains("equipment", [filters.equipment.value])
        if filters.difficulty:
            query = query.eq("difficulty", filters.difficulty.value)
        if filters.search:
            query = query.ilike("name", f"%{filters.search}%")
        return query

    def get_page(
        self,
        filters: ExerciseFilters,
        *,
        offset: int,
        limit: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        with store_call("list exercises"):
            query = self._client.table(TABLE).select("*", count="exact")
            query = self._apply_filters(query, filters)
            result = (
                query.order("created_at", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
        return result.data or [], result.count or 0

    def get_by_id(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        with store_call("get exercise"):
            result = self._client.table(TABLE).select("*").eq("id", exercise_id).execute()
        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    def get_by_ids(self, exercise_ids: Sequence[str]) -> List[Dict[str, Any]]:
        ids = list(dict.fromkeys(exercise_ids))
        if not ids:
            return []
        with store_call("batch get exercises"):
            result = self._client.table(TABLE).select("*").in_("id", ids).execute()
        return result.data or []

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.create_many([data])[0]

    def create_many(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not rows:
            return []
        now = _now()
        payload = [{**row, "created_at": now, "updated_at": now} for row in rows]
        with store_call("insert exercises"):
            result = self._client.table(TABLE).insert(payload).execute()
        return result.data or []

    def count(self) -> int:
        with store_call("count exercises"):
            result = self._client.table(TABLE).select("id", count="exact").limit(1).execute()
        return result.count or 0

    def get_facets(self) -> List[Dict[str, Any]]:
        facets: List[Dict[str, Any]] = []
        offset = 0
        with store_call("scan exercise facets"):
            while True:
                result = (
                    self._client.table(TABLE)
                    .select(FACET_COLUMNS)
                    .order("id")
                    .range(offset, offset + FACET_CHUNK_SIZE - 1)
                    .execute()
                )
                chunk = result.data or []
                facets.extend(chunk)
                if len(chunk) < FACET_CHUNK_SIZE:
                    break
                offset += FACET_CHUNK_SIZE
        return facets

    def get_recent(self, limit: int = 5) -> List[Dict[str, Any]]:
        with store_call("recent exercises"):
            result = (
                self._client.table(TABLE)
                .select(RECENT_COLUMNS)
                .neq("name", "")
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        return result.data or []
