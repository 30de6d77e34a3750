"""
Unit tests for the Supabase repository implementations.

The Supabase client is replaced by a MagicMock query builder, so these tests
check which PostgREST filters each method pushes down and how results and
failures come back. No database is required.
"""
from datetime import datetime, timezone
from typing import Any, List, Optional
from unittest.mock import MagicMock, call

import httpx
import pytest

from application.exceptions import RepositoryError, StoreUnavailableError
from domain.models import (
    DateRange,
    Difficulty,
    ExerciseFilters,
    MuscleGroup,
    RoutineCategory,
    RoutineFilters,
)
from infrastructure import (
    SupabaseExercisesRepository,
    SupabaseRoutineRepository,
    SupabaseWorkoutLogRepository,
)
from infrastructure.db import store_call
from infrastructure.db.exercises_repository import FACET_CHUNK_SIZE

pytestmark = pytest.mark.unit

BUILDER_METHODS = (
    "select", "eq", "neq", "in_", "contains", "ilike", "gte", "lte",
    "order", "range", "limit", "insert", "update", "delete",
)


def mock_client(data: Optional[List[Any]] = None, count: Optional[int] = None):
    """Client whose query builder returns itself and executes to ``data``."""
    query = MagicMock()
    for name in BUILDER_METHODS:
        getattr(query, name).return_value = query
    query.execute.return_value = MagicMock(data=data, count=count)
    client = MagicMock()
    client.table.return_value = query
    return client, query


# ============================================================================
# store_call
# ============================================================================

class TestStoreCall:
    """Store failures become application exceptions."""

    def test_passes_through_on_success(self):
        with store_call("noop"):
            value = 1
        assert value == 1

    def test_timeout_is_unavailable(self):
        with pytest.raises(StoreUnavailableError) as exc_info:
            with store_call("list routines"):
                raise httpx.ReadTimeout("timed out")
        assert exc_info.value.status_code == 503
        assert exc_info.value.operation == "list routines"

    def test_other_failure_is_repository_error(self, caplog):
        with pytest.raises(RepositoryError) as exc_info:
            with store_call("insert routine"):
                raise ValueError("column does not exist")
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Internal server error"
        assert "insert routine" in caplog.text

    def test_repository_timeout_propagates(self):
        client, query = mock_client()
        query.execute.side_effect = httpx.ConnectTimeout("slow")
        repo = SupabaseRoutineRepository(client)
        with pytest.raises(StoreUnavailableError):
            repo.get_public()


# ============================================================================
# Exercises
# ============================================================================

class TestSupabaseExercisesRepository:
    """Catalog queries."""

    def test_get_page_pushes_filters(self):
        client, query = mock_client(data=[{"id": "e1"}], count=7)
        repo = SupabaseExercisesRepository(client)
        filters = ExerciseFilters(
            muscle_group=MuscleGroup.LEGS,
            difficulty=Difficulty.BEGINNER,
            search="sent",
        )

        rows, total = repo.get_page(filters, offset=20, limit=10)

        assert rows == [{"id": "e1"}]
        assert total == 7
        client.table.assert_called_with("exercises")
        query.select.assert_called_with("*", count="exact")
        query.contains.assert_called_once_with("muscle_groups", ["legs"])
        query.eq.assert_called_once_with("difficulty", "beginner")
        query.ilike.assert_called_once_with("name", "%sent%")
        query.order.assert_called_once_with("created_at", desc=True)
        query.range.assert_called_once_with(20, 29)

    def test_get_page_without_filters(self):
        client, query = mock_client(data=None, count=None)
        rows, total = SupabaseExercisesRepository(client).get_page(ExerciseFilters(), offset=0, limit=20)
        assert (rows, total) == ([], 0)
        query.contains.assert_not_called()
        query.ilike.assert_not_called()

    def test_get_by_id_missing(self):
        client, _ = mock_client(data=[])
        assert SupabaseExercisesRepository(client).get_by_id("e1") is None

    def test_get_by_ids_deduplicates(self):
        client, query = mock_client(data=[{"id": "e1"}])
        SupabaseExercisesRepository(client).get_by_ids(["e1", "e2", "e1"])
        query.in_.assert_called_once_with("id", ["e1", "e2"])

    def test_get_by_ids_empty_skips_store(self):
        client, _ = mock_client()
        assert SupabaseExercisesRepository(client).get_by_ids([]) == []
        client.table.assert_not_called()

    def test_create_many_single_insert_with_timestamps(self):
        client, query = mock_client(data=[{"id": "e1"}, {"id": "e2"}])
        rows = SupabaseExercisesRepository(client).create_many([{"name": "A"}, {"name": "B"}])
        assert len(rows) == 2
        (payload,), _ = query.insert.call_args
        assert [p["name"] for p in payload] == ["A", "B"]
        assert all(p["created_at"] == p["updated_at"] for p in payload)

    def test_count(self):
        client, _ = mock_client(data=[{"id": "e1"}], count=23)
        assert SupabaseExercisesRepository(client).count() == 23

    def test_get_facets_reads_in_chunks(self):
        client, query = mock_client()
        full = [{"difficulty": "beginner"}] * FACET_CHUNK_SIZE
        query.execute.side_effect = [MagicMock(data=full), MagicMock(data=[{"difficulty": "advanced"}])]

        facets = SupabaseExercisesRepository(client).get_facets()

        assert len(facets) == FACET_CHUNK_SIZE + 1
        assert query.range.call_args_list == [
            call(0, FACET_CHUNK_SIZE - 1),
            call(FACET_CHUNK_SIZE, 2 * FACET_CHUNK_SIZE - 1),
        ]

    def test_get_recent_skips_unnamed(self):
        client, query = mock_client(data=[])
        SupabaseExercisesRepository(client).get_recent(limit=5)
        query.neq.assert_called_once_with("name", "")
        query.limit.assert_called_once_with(5)


# ============================================================================
# Routines
# ============================================================================

class TestSupabaseRoutineRepository:
    """Routine queries always scope by owner where required."""

    def test_page_scoped_to_active_owned(self):
        client, query = mock_client(data=[], count=0)
        repo = SupabaseRoutineRepository(client)

        repo.get_page_for_owner(
            "user-1",
            RoutineFilters(category=RoutineCategory.CARDIO, is_public=False),
            offset=0,
            limit=10,
        )

        assert query.eq.call_args_list == [
            call("owner_id", "user-1"),
            call("is_active", True),
            call("category", "cardio"),
            call("is_public", False),
        ]

    def test_get_public(self):
        client, query = mock_client(data=[{"id": "r1"}])
        assert SupabaseRoutineRepository(client).get_public(limit=3) == [{"id": "r1"}]
        query.eq.assert_called_once_with("is_public", True)
        query.limit.assert_called_once_with(3)

    def test_update_owned_strips_protected_fields(self):
        client, query = mock_client(data=[{"id": "r1"}])
        repo = SupabaseRoutineRepository(client)

        result = repo.update_owned(
            "r1",
            "user-1",
            {"name": "Nueva", "owner_id": "intruder", "is_active": False, "created_at": "x"},
        )

        assert result == {"id": "r1"}
        (update_data,), _ = query.update.call_args
        assert update_data["name"] == "Nueva"
        assert "owner_id" not in update_data
        assert "is_active" not in update_data
        assert "created_at" not in update_data
        assert "updated_at" in update_data
        assert query.eq.call_args_list == [call("id", "r1"), call("owner_id", "user-1")]

    def test_update_not_owned_returns_none(self):
        client, _ = mock_client(data=[])
        assert SupabaseRoutineRepository(client).update_owned("r1", "user-2", {"name": "X"}) is None

    def test_delete_owned(self):
        client, query = mock_client(data=[{"id": "r1"}])
        assert SupabaseRoutineRepository(client).delete_owned("r1", "user-1") == {"id": "r1"}
        query.delete.assert_called_once()

    def test_delete_not_owned_returns_none(self):
        client, _ = mock_client(data=[])
        assert SupabaseRoutineRepository(client).delete_owned("r1", "user-2") is None


# ============================================================================
# Workout logs
# ============================================================================

class TestSupabaseWorkoutLogRepository:
    """Workout log queries."""

    def test_date_bounds_pushed_as_utc(self):
        client, query = mock_client(data=[], count=0)
        repo = SupabaseWorkoutLogRepository(client)
        created = DateRange(
            start=datetime(2024, 1, 1),
            end=datetime(2024, 1, 31, 23, 59, tzinfo=timezone.utc),
        )

        repo.get_page_for_owner("user-1", created, offset=0, limit=10)

        query.eq.assert_called_once_with("owner_id", "user-1")
        query.gte.assert_called_once_with("created_at", "2024-01-01T00:00:00+00:00")
        query.lte.assert_called_once_with("created_at", "2024-01-31T23:59:00+00:00")

    def test_open_range_has_no_bounds(self):
        client, query = mock_client(data=[], count=0)
        SupabaseWorkoutLogRepository(client).get_page_for_owner("user-1", DateRange(), offset=0, limit=10)
        query.gte.assert_not_called()
        query.lte.assert_not_called()

    def test_create_returns_row(self):
        client, query = mock_client(data=[{"id": "l1", "owner_id": "user-1"}])
        row = SupabaseWorkoutLogRepository(client).create({"owner_id": "user-1", "routine_id": "r1"})
        assert row["id"] == "l1"
        (payload,), _ = query.insert.call_args
        assert payload["routine_id"] == "r1"
        assert "created_at" in payload
