"""
Pagination and filter value objects shared by every store.

Page numbers are 1-based. A filter attribute left as None imposes no
constraint; it never means "match null".
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar

from domain.models.enums import Difficulty, Equipment, MuscleGroup, RoutineCategory

T = TypeVar("T")


def page_count(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items, ``limit`` per page."""
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


@dataclass(frozen=True)
class PageRequest:
    """
    A requested page.

    Examples:
        >>> PageRequest(page=3, limit=10).offset
        20
    """

    page: int = 1
    limit: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.limit < 1:
            raise ValueError("limit must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """One page of results plus the total number of matches."""

    items: List[T]
    total: int
    request: PageRequest

    @property
    def current_page(self) -> int:
        return self.request.page

    @property
    def total_pages(self) -> int:
        return page_count(self.total, self.request.limit)


@dataclass(frozen=True)
class ExerciseFilters:
    muscle_group: Optional[MuscleGroup] = None
    equipment: Optional[Equipment] = None
    difficulty: Optional[Difficulty] = None
    search: Optional[str] = None

    def matches(self, record: dict) -> bool:
        """In-memory evaluation of the filters against a stored record."""
        if self.muscle_group and self.muscle_group.value not in (record.get("muscle_groups") or []):
            return False
        if self.equipment and self.equipment.value not in (record.get("equipment") or []):
            return False
        if self.difficulty and record.get("difficulty") != self.difficulty.value:
            return False
        if self.search and self.search.lower() not in (record.get("name") or "").lower():
            return False
        return True


@dataclass(frozen=True)
class RoutineFilters:
    category: Optional[RoutineCategory] = None
    difficulty: Optional[Difficulty] = None
    is_public: Optional[bool] = None

    def matches(self, record: dict) -> bool:
        if self.category and record.get("category") != self.category.value:
            return False
        if self.difficulty and record.get("difficulty") != self.difficulty.value:
            return False
        if self.is_public is not None and bool(record.get("is_public")) != self.is_public:
            return False
        return True


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class DateRange:
    """Inclusive creation-time bounds; either side may be open."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None

    def contains(self, moment: datetime) -> bool:
        moment = as_utc(moment)
        if self.start is not None and moment < as_utc(self.start):
            return False
        if self.end is not None and moment > as_utc(self.end):
            return False
        return True
