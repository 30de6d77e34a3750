"""
Routines router.

A routine is readable by its owner and, when public, by anyone. Only the
owner can change or delete it. Routines the caller may not see answer 404,
the same as missing ones.

/popular and /summary are declared before /{routine_id}.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import Settings, get_current_user, get_routine_manager, get_settings
from api.schemas import MessageResponse, PopularRoutinesResponse, RoutineListResponse
from application.use_cases import RoutineManager
from backend.settings import MAX_PAGE_SIZE
from domain.models import (
    Difficulty,
    PageRequest,
    Routine,
    RoutineCategory,
    RoutineFilters,
    RoutinePayload,
    RoutineStats,
)

router = APIRouter(
    prefix="/routines",
    tags=["Routines"],
)


@router.get("", response_model=RoutineListResponse)
def list_routines(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE),
    category: Optional[RoutineCategory] = Query(None),
    difficulty: Optional[Difficulty] = Query(None),
    is_public: Optional[bool] = Query(None, alias="isPublic"),
    user_id: str = Depends(get_current_user),
    routines: RoutineManager = Depends(get_routine_manager),
    settings: Settings = Depends(get_settings),
):
    """List the caller's active routines, newest first."""
    filters = RoutineFilters(category=category, difficulty=difficulty, is_public=is_public)
    request = PageRequest(page=page, limit=limit or settings.routines_page_size)
    return RoutineListResponse.from_page(routines.list(user_id, filters, request))


@router.get("/popular", response_model=PopularRoutinesResponse)
def popular_routines(
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE),
    user_id: str = Depends(get_current_user),
    routines: RoutineManager = Depends(get_routine_manager),
    settings: Settings = Depends(get_settings),
):
    """Public routines of every owner, newest first."""
    return PopularRoutinesResponse(
        routines=routines.list_popular(limit or settings.popular_routines_limit)
    )


@router.get("/summary", response_model=RoutineStats)
def routine_summary(
    user_id: str = Depends(get_current_user),
    routines: RoutineManager = Depends(get_routine_manager),
):
    """Counts by category, difficulty and duration bucket plus the 5 newest routines."""
    return routines.summary(user_id)


@router.get("/{routine_id}", response_model=Routine)
def get_routine(
    routine_id: str,
    user_id: str = Depends(get_current_user),
    routines: RoutineManager = Depends(get_routine_manager),
):
    return routines.get(routine_id, user_id)


@router.post("", response_model=Routine, status_code=201)
def create_routine(
    payload: RoutinePayload,
    user_id: str = Depends(get_current_user),
    routines: RoutineManager = Depends(get_routine_manager),
):
    return routines.create(user_id, payload)


@router.put("/{routine_id}", response_model=Routine)
def update_routine(
    routine_id: str,
    payload: RoutinePayload,
    user_id: str = Depends(get_current_user),
    routines: RoutineManager = Depends(get_routine_manager),
):
    """Replace every mutable field of a routine the caller owns."""
    return routines.update(routine_id, user_id, payload)


@router.delete("/{routine_id}", response_model=MessageResponse)
def delete_routine(
    routine_id: str,
    user_id: str = Depends(get_current_user),
    routines: RoutineManager = Depends(get_routine_manager),
):
    routines.delete(routine_id, user_id)
    return MessageResponse(message="Routine deleted successfully")
