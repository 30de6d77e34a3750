"""
Group-and-count aggregations for the catalog and routine dashboards.

List-valued fields are unwound: an exercise targeting legs and core counts
once in each group. Empty and null values are skipped.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Sequence

from domain.models import (
    CatalogBreakdown,
    CatalogStats,
    DurationBucket,
    GroupCount,
    RecentExercise,
    RecentRoutine,
    Routine,
    RoutineBreakdown,
    RoutineStats,
    as_utc,
)

RECENT_LIMIT = 5

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _created_key(routine: Routine) -> datetime:
    return as_utc(routine.created_at) if routine.created_at else _EPOCH


def _plain(value: Any) -> Any:
    return getattr(value, "value", value)


def count_groups(values: Iterable[Any]) -> List[GroupCount]:
    """
    Count occurrences, most frequent first, ties broken by value.

    Examples:
        >>> [(g.value, g.count) for g in count_groups(["legs", "core", "legs", None, ""])]
        [('legs', 2), ('core', 1)]
    """
    counts = Counter(str(_plain(v)) for v in values if v not in (None, ""))
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [GroupCount(value=value, count=count) for value, count in ordered]


def _unwind(records: Iterable[Dict[str, Any]], field: str) -> Iterable[Any]:
    for record in records:
        yield from record.get(field) or []


def summarize_catalog(
    total: int,
    facets: Sequence[Dict[str, Any]],
    recent: Sequence[RecentExercise],
) -> CatalogStats:
    """Build the catalog statistics from the facet rows of every exercise."""
    return CatalogStats(
        total_exercises=total,
        stats=CatalogBreakdown(
            by_muscle_group=count_groups(_unwind(facets, "muscle_groups")),
            by_difficulty=count_groups(row.get("difficulty") for row in facets),
            by_equipment=count_groups(_unwind(facets, "equipment")),
        ),
        recent_exercises=list(recent)[:RECENT_LIMIT],
    )


def summarize_routines(routines: Sequence[Routine]) -> RoutineStats:
    """
    Dashboard summary of a routine list.

    Duration buckets are short (up to 30 min), medium (31 to 60) and long
    (over 60); all three are always reported, in that order.
    """
    buckets = Counter(DurationBucket.for_minutes(r.estimated_duration) for r in routines)
    newest = sorted(routines, key=_created_key, reverse=True)

    return RoutineStats(
        total_routines=len(routines),
        stats=RoutineBreakdown(
            by_category=count_groups(r.category for r in routines),
            by_difficulty=count_groups(r.difficulty for r in routines),
            by_duration=[
                GroupCount(value=bucket.value, count=buckets[bucket])
                for bucket in DurationBucket
            ],
        ),
        recent_routines=[
            RecentRoutine(
                id=r.id,
                name=r.name,
                category=r.category,
                difficulty=r.difficulty,
                estimated_duration=r.estimated_duration,
                exercise_count=len(r.exercises),
                created_at=r.created_at,
            )
            for r in newest[:RECENT_LIMIT]
        ],
    )
