"""
Workout logs router.

Logs are append-only: there is no update or delete endpoint.
"""
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import Settings, get_current_user, get_settings, get_workout_log_book
from api.schemas import WorkoutLogListResponse
from application.use_cases import WorkoutLogBook
from backend.settings import MAX_PAGE_SIZE
from domain.models import DateRange, PageRequest, WorkoutLog, WorkoutLogPayload

router = APIRouter(
    prefix="/workout-logs",
    tags=["Workout Logs"],
)


@router.get("", response_model=WorkoutLogListResponse)
def list_workout_logs(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE),
    start_date: Optional[datetime] = Query(None, alias="startDate", description="Inclusive lower bound on createdAt"),
    end_date: Optional[datetime] = Query(None, alias="endDate", description="Inclusive upper bound on createdAt"),
    user_id: str = Depends(get_current_user),
    logs: WorkoutLogBook = Depends(get_workout_log_book),
    settings: Settings = Depends(get_settings),
):
    """List the caller's logs, newest first. Dates without a timezone are read as UTC."""
    request = PageRequest(page=page, limit=limit or settings.workout_logs_page_size)
    created = DateRange(start=start_date, end=end_date)
    return WorkoutLogListResponse.from_page(logs.list(user_id, created, request))


@router.post("", response_model=WorkoutLog, status_code=201)
def create_workout_log(
    payload: WorkoutLogPayload,
    user_id: str = Depends(get_current_user),
    logs: WorkoutLogBook = Depends(get_workout_log_book),
):
    return logs.create(user_id, payload)
