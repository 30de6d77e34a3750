"""
Response envelopes for list and bulk endpoints.

Paginated responses carry ``total``, ``currentPage`` and ``totalPages``
next to the items.
"""

from typing import Any, List

from pydantic import Field

from domain.models import CamelModel, Exercise, Page, Routine, WorkoutLog


class PaginatedResponse(CamelModel):
    total: int = Field(..., description="Number of matches across all pages")
    current_page: int
    total_pages: int

    @staticmethod
    def page_fields(page: Page) -> dict:
        return {
            "total": page.total,
            "current_page": page.current_page,
            "total_pages": page.total_pages,
        }


class ExerciseListResponse(PaginatedResponse):
    exercises: List[Exercise] = Field(default_factory=list)

    @classmethod
    def from_page(cls, page: Page[Exercise]) -> "ExerciseListResponse":
        return cls(exercises=page.items, **cls.page_fields(page))


class RoutineListResponse(PaginatedResponse):
    routines: List[Routine] = Field(default_factory=list)

    @classmethod
    def from_page(cls, page: Page[Routine]) -> "RoutineListResponse":
        return cls(routines=page.items, **cls.page_fields(page))


class WorkoutLogListResponse(PaginatedResponse):
    logs: List[WorkoutLog] = Field(default_factory=list)

    @classmethod
    def from_page(cls, page: Page[WorkoutLog]) -> "WorkoutLogListResponse":
        return cls(logs=page.items, **cls.page_fields(page))


class PopularRoutinesResponse(CamelModel):
    routines: List[Routine] = Field(default_factory=list)


class ExerciseBatchResponse(CamelModel):
    """Result of a bulk create or a seed."""

    message: str
    exercises: List[Exercise] = Field(default_factory=list)


class MessageResponse(CamelModel):
    message: str


class BulkExercisesRequest(CamelModel):
    """
    Body of ``POST /exercises/bulk``.

    Items are validated one by one by the catalog so the error can name the
    failing exercise; here they are only required to be present.
    """

    exercises: Any = None
