"""
Exercises router for the shared exercise catalog.

This router provides endpoints for:
- Browsing the catalog with filters and pagination
- Catalog statistics
- Creating exercises one at a time or in bulk
- Seeding the default catalog into an empty store

Static paths (/stats, /bulk, /seed) are declared before /{exercise_id} so
they are never captured as ids.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import Settings, get_current_user, get_exercise_catalog, get_settings
from api.schemas import BulkExercisesRequest, ExerciseBatchResponse, ExerciseListResponse
from application.use_cases import ExerciseCatalog
from backend.settings import MAX_PAGE_SIZE
from domain.models import (
    CatalogStats,
    Difficulty,
    Equipment,
    Exercise,
    ExerciseCreate,
    ExerciseFilters,
    MuscleGroup,
    PageRequest,
)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=ExerciseListResponse)
def list_exercises(
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    muscle_group: Optional[MuscleGroup] = Query(None, alias="muscleGroup"),
    equipment: Optional[Equipment] = Query(None),
    difficulty: Optional[Difficulty] = Query(None),
    search: Optional[str] = Query(None, description="Case-insensitive name substring"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    List exercises matching every given filter, newest first.

    muscleGroup and equipment match exercises whose lists contain the value.
    """
    filters = ExerciseFilters(
        muscle_group=muscle_group,
        equipment=equipment,
        difficulty=difficulty,
        search=search.strip() if search and search.strip() else None,
    )
    request = PageRequest(page=page, limit=limit or settings.exercises_page_size)
    return ExerciseListResponse.from_page(catalog.list(filters, request))


@router.get("/stats", response_model=CatalogStats)
def exercise_stats(catalog: ExerciseCatalog = Depends(get_exercise_catalog)):
    """Totals, per muscle group / difficulty / equipment counts and the 5 newest exercises."""
    return catalog.stats()


@router.post("/bulk", response_model=ExerciseBatchResponse, status_code=201)
def bulk_create_exercises(
    body: BulkExercisesRequest,
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    """Create several exercises. Nothing is stored unless every item is valid."""
    exercises = catalog.bulk_create(body.exercises)
    return ExerciseBatchResponse(
        message=f"Successfully created {len(exercises)} exercises",
        exercises=exercises,
    )


@router.post("/seed", response_model=ExerciseBatchResponse, status_code=201)
def seed_exercises(catalog: ExerciseCatalog = Depends(get_exercise_catalog)):
    """Insert the default catalog. Refused once any exercise exists."""
    exercises = catalog.seed()
    return ExerciseBatchResponse(
        message=f"Successfully seeded {len(exercises)} exercises",
        exercises=exercises,
    )


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise(
    exercise_id: str,
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    return catalog.get(exercise_id)


@router.post("", response_model=Exercise, status_code=201)
def create_exercise(
    payload: ExerciseCreate,
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
):
    return catalog.create(payload)
