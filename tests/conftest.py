"""
Shared fixtures for the routine service tests.

Provides:
- a test Settings instance and an app built from it
- fresh in-memory fake repositories wired in through dependency overrides
- a token factory that signs real HS256 access tokens with the test secret

Usage:
    def test_list_routines(client, fake_routine_repo, auth_headers):
        fake_routine_repo.seed([{"owner_id": TEST_USER_ID, "name": "Pierna"}])
        response = client.get("/routines", headers=auth_headers())
        assert response.status_code == 200
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings, get_settings
from tests.fakes import (
    FakeExercisesRepository,
    FakeRoutineRepository,
    FakeWorkoutLogRepository,
)

TEST_USER_ID = "test-user-123"
OTHER_USER_ID = "test-user-456"
TEST_JWT_SECRET = "test-jwt-secret"


# =============================================================================
# Settings and Tokens
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        jwt_secret=TEST_JWT_SECRET,
        _env_file=None,
    )


def make_token(
    subject_id: Optional[str] = TEST_USER_ID,
    *,
    secret: str = TEST_JWT_SECRET,
    expires_in: timedelta = timedelta(hours=1),
    role: str = "user",
    **claims: Any,
) -> str:
    """Sign an access token shaped like the ones the auth service issues."""
    payload: Dict[str, Any] = {
        "username": "tester",
        "email": "tester@example.com",
        "role": role,
        "exp": datetime.now(timezone.utc) + expires_in,
        **claims,
    }
    if subject_id is not None:
        payload["id"] = subject_id
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def auth_headers() -> Callable[..., Dict[str, str]]:
    """
    Build an Authorization header for a user.

    Usage:
        client.get("/routines", headers=auth_headers())
        client.get("/routines", headers=auth_headers(OTHER_USER_ID))
    """

    def _headers(subject_id: str = TEST_USER_ID, **kwargs: Any) -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(subject_id, **kwargs)}"}

    return _headers


# =============================================================================
# Fake Repositories
# =============================================================================


@pytest.fixture
def fake_exercises_repo() -> FakeExercisesRepository:
    return FakeExercisesRepository()


@pytest.fixture
def fake_routine_repo() -> FakeRoutineRepository:
    return FakeRoutineRepository()


@pytest.fixture
def fake_workout_log_repo() -> FakeWorkoutLogRepository:
    return FakeWorkoutLogRepository()


# =============================================================================
# App and Client
# =============================================================================


def override_dependency(app: FastAPI, getter: Callable[..., Any], implementation: Any) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Example:
        repo = FakeRoutineRepository()
        override_dependency(app, deps.get_routine_repo, repo)
    """
    app.dependency_overrides[getter] = lambda: implementation


@pytest.fixture
def app(
    test_settings: Settings,
    fake_exercises_repo: FakeExercisesRepository,
    fake_routine_repo: FakeRoutineRepository,
    fake_workout_log_repo: FakeWorkoutLogRepository,
) -> FastAPI:
    """App built from test settings with every repository replaced by a fake."""
    application = create_app(settings=test_settings)
    override_dependency(application, get_settings, test_settings)
    override_dependency(application, deps.get_exercises_repo, fake_exercises_repo)
    override_dependency(application, deps.get_routine_repo, fake_routine_repo)
    override_dependency(application, deps.get_workout_log_repo, fake_workout_log_repo)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
