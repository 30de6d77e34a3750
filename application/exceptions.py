"""
Application-layer exceptions.

These exceptions are raised by use cases and repositories and translated to
JSON error responses by the handlers registered in backend.main.
"""

from typing import Any, Dict, Optional


class RoutineServiceError(Exception):
    """Base class for errors the service reports to callers."""

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(RoutineServiceError):
    """Malformed or out-of-range input. The message names the first failing field."""

    status_code = 400
    public_message = "Invalid request"


class NotFoundError(RoutineServiceError):
    """
    Entity does not exist, or exists but is not visible to the caller.

    Both cases share the same response so private resources cannot be
    enumerated.
    """

    status_code = 404

    def __init__(self, entity: str):
        super().__init__(f"{entity} not found")
        self.entity = entity


class ConflictError(RoutineServiceError):
    """The catalog already holds exercises, so seeding is refused."""

    status_code = 400

    def __init__(self, message: str, count: int):
        super().__init__(message)
        self.count = count

    def to_body(self) -> Dict[str, Any]:
        return {"error": self.message, "count": self.count}


class RepositoryError(RoutineServiceError):
    """Unexpected store failure. Details are logged, never returned."""

    status_code = 500

    def __init__(self, operation: str):
        super().__init__(self.public_message)
        self.operation = operation


class StoreUnavailableError(RepositoryError):
    """The store did not answer within the configured timeout. Safe to retry."""

    status_code = 503
    public_message = "Service temporarily unavailable"
