"""
Exercise Catalog Use Case.

Browsing, creating and seeding the shared exercise catalog, plus catalog
statistics. Exercises have no owner; any authenticated caller may read or
add to the catalog.
"""
import logging
from typing import Any, List

from pydantic import ValidationError as PydanticValidationError

from application.exceptions import ConflictError, NotFoundError, ValidationError
from application.ports import ExercisesRepository
from domain.aggregations import RECENT_LIMIT, summarize_catalog
from domain.converters import db_row_to_exercise, db_row_to_recent_exercise
from domain.default_exercises import DEFAULT_EXERCISES
from domain.models import (
    CatalogStats,
    Exercise,
    ExerciseCreate,
    ExerciseFilters,
    Page,
    PageRequest,
    describe_first_error,
    is_valid_id,
)

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """Use case for the shared exercise catalog."""

    def __init__(self, exercises_repo: ExercisesRepository):
        self._exercises_repo = exercises_repo

    def list(self, filters: ExerciseFilters, page: PageRequest) -> Page[Exercise]:
        """
        List exercises matching all filters, newest first.

        Args:
            filters: Muscle group, equipment, difficulty and name search
            page: Requested page

        Returns:
            Page of exercises with the total number of matches
        """
        rows, total = self._exercises_repo.get_page(
            filters,
            offset=page.offset,
            limit=page.limit,
        )
        return Page(items=[db_row_to_exercise(row) for row in rows], total=total, request=page)

    def get(self, exercise_id: str) -> Exercise:
        if not is_valid_id(exercise_id):
            raise NotFoundError("Exercise")
        row = self._exercises_repo.get_by_id(exercise_id)
        if row is None:
            raise NotFoundError("Exercise")
        return db_row_to_exercise(row)

    def create(self, payload: ExerciseCreate) -> Exercise:
        row = self._exercises_repo.create(payload.to_record())
        logger.info("Exercise created: %s (%s)", row.get("id"), payload.name)
        return db_row_to_exercise(row)

    def bulk_create(self, items: Any) -> List[Exercise]:
        """
        Validate every item, then insert them all.

        Nothing is written unless every item is valid. The error names the
        first invalid item by name and index.

        Raises:
            ValidationError: If ``items`` is not a non-empty list or any item is invalid
        """
        if not isinstance(items, list):
            raise ValidationError("exercises must be an array")
        if not items:
            raise ValidationError("exercises must contain at least one exercise")

        payloads = []
        for index, item in enumerate(items):
            try:
                payloads.append(ExerciseCreate.model_validate(item))
            except PydanticValidationError as exc:
                name = item.get("name") if isinstance(item, dict) else None
                raise ValidationError(
                    f'Validation error for exercise "{name or ""}" (index {index}): '
                    f"{describe_first_error(exc.errors())}"
                ) from exc

        rows = self._exercises_repo.create_many([p.to_record() for p in payloads])
        logger.info("Bulk created %d exercises", len(rows))
        return [db_row_to_exercise(row) for row in rows]

    def seed(self) -> List[Exercise]:
        """
        Insert the default catalog into an empty store.

        Raises:
            ConflictError: If the catalog already holds any exercise
        """
        existing = self._exercises_repo.count()
        if existing > 0:
            raise ConflictError("Exercises already exist in database", count=existing)

        records = [ExerciseCreate.model_validate(data).to_record() for data in DEFAULT_EXERCISES]
        rows = self._exercises_repo.create_many(records)
        logger.info("Seeded %d exercises", len(rows))
        return [db_row_to_exercise(row) for row in rows]

    def stats(self) -> CatalogStats:
        total = self._exercises_repo.count()
        facets = self._exercises_repo.get_facets()
        recent = [
            db_row_to_recent_exercise(row)
            for row in self._exercises_repo.get_recent(limit=RECENT_LIMIT)
        ]
        return summarize_catalog(total, facets, recent)
