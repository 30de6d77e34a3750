"""
Health check router.

This router provides the liveness endpoint for monitoring and load balancers.
It is the only endpoint that does not require a bearer credential.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint for routine-service.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "OK", "service": "routine-service"}
