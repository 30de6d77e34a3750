"""
Supabase implementation of RoutineRepository.

This module provides the concrete Supabase implementation for routine
persistence (``routines`` table). Entries are embedded as a jsonb column so
a routine is always written in a single statement.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from supabase import Client

from domain.models import RoutineFilters
from infrastructure.db.store_errors import store_call

logger = logging.getLogger(__name__)

TABLE = "routines"


class SupabaseRoutineRepository:
    """
    Supabase implementation of RoutineRepository protocol.

    Mutations filter on both ``id`` and ``owner_id``, so a caller who does
    not own the routine matches no row.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_page_for_owner(
        self,
        owner_id: str,
        filters: RoutineFilters,
        *,
        offset: int,
        limit: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        with store_call("list routines"):
            query = (
                self._client.table(TABLE)
                .select("*", count="exact")
                .eq("owner_id", owner_id)
                .eq("is_active", True)
            )
            if filters.category:
                query = query.eq("category", filters.category.value)
            if filters.difficulty:
                query = query.eq("difficulty", filters.difficulty.value)
            if filters.is_public is not None:
                query = query.eq("is_public", filters.is_public)
            result = (
                query.order("created_at", desc=True)
                .range(offset, offset + limit - 1)
                .execute()
            )
        return result.data or [], result.count or 0

    def get_all_for_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        with store_call("list all routines"):
            result = (
                self._client.table(TABLE)
                .select("*")
                .eq("owner_id", owner_id)
                .eq("is_active", True)
                .order("created_at", desc=True)
                .execute()
            )
        return result.data or []

    def get_public(self, limit: int = 10) -> List[Dict[str, Any]]:
        with store_call("list public routines"):
            result = (
                self._client.table(TABLE)
                .select("*")
                .eq("is_public", True)
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        return result.data or []

    def get_by_id(self, routine_id: str) -> Optional[Dict[str, Any]]:
        with store_call("get routine"):
            result = self._client.table(TABLE).select("*").eq("id", routine_id).execute()
        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    def get_by_ids(self, routine_ids: Sequence[str]) -> List[Dict[str, Any]]:
        ids = list(dict.fromkeys(routine_ids))
        if not ids:
            return []
        with store_call("batch get routines"):
            result = self._client.table(TABLE).select("*").in_("id", ids).execute()
        return result.data or []

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        with store_call("insert routine"):
            result = (
                self._client.table(TABLE)
                .insert({**data, "created_at": now, "updated_at": now})
                .execute()
            )
        return result.data[0]

    def update_owned(
        self,
        routine_id: str,
        owner_id: str,
        data: Dict[str, Any],
    ) -> Optional[Dict[str, Any]]:
        # owner_id, is_active and created_at are never part of the update.
        update_data = {
            key: value
            for key, value in data.items()
            if key not in ("id", "owner_id", "is_active", "created_at")
        }
        update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
        with store_call("update routine"):
            result = (
                self._client.table(TABLE)
                .update(update_data)
                .eq("id", routine_id)
                .eq("owner_id", owner_id)
                .execute()
            )
        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    def delete_owned(self, routine_id: str, owner_id: str) -> Optional[Dict[str, Any]]:
        with store_call("delete routine"):
            result = (
                self._client.table(TABLE)
                .delete()
                .eq("id", routine_id)
                .eq("owner_id", owner_id)
                .execute()
            )
        if result.data and len(result.data) > 0:
            return result.data[0]
        return None
