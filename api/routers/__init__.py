"""
Router package for the routine service.

This package contains all API routers organized by domain:
- health: Liveness endpoint
- exercises: Shared exercise catalog, statistics and seeding
- routines: User-owned routines, popular routines and dashboard summary
- workout_logs: Append-only workout history
"""

from api.routers.exercises import router as exercises_router
from api.routers.health import router as health_router
from api.routers.routines import router as routines_router
from api.routers.workout_logs import router as workout_logs_router

__all__ = [
    "exercises_router",
    "health_router",
    "routines_router",
    "workout_logs_router",
]
