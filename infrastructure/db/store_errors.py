"""
Translation of store client failures into application exceptions.

The Supabase client talks to PostgREST over httpx, so a request that runs
past the configured timeout surfaces as ``httpx.TimeoutException``. Every
other failure (PostgREST ``APIError``, connection errors, bad responses) is
treated as an internal error. Details are logged here and never returned to
callers.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

import httpx

from application.exceptions import RepositoryError, StoreUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def store_call(operation: str) -> Iterator[None]:
    """
    Wrap a store request.

    Usage:
        with store_call("list routines"):
            result = client.table("routines").select("*").execute()

    Raises:
        StoreUnavailableError: If the store timed out
        RepositoryError: For any other store failure
    """
    try:
        yield
    except httpx.TimeoutException as e:
        logger.error(f"Store timeout during {operation}: {e}")
        raise StoreUnavailableError(operation) from e
    except Exception as e:
        logger.exception(f"Store error during {operation}")
        raise RepositoryError(operation) from e
