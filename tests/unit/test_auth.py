"""
Unit tests for backend/auth.py
"""

from datetime import timedelta

import jwt
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from backend.auth import (
    IdentityClaims,
    InvalidTokenError,
    get_current_claims,
    verify_access_token,
)
from backend.settings import get_settings
from tests.conftest import TEST_JWT_SECRET, TEST_USER_ID, make_token

pytestmark = pytest.mark.unit


class TestVerifyAccessToken:
    """Signature, expiry and subject extraction."""

    def test_valid_token(self, test_settings):
        claims = verify_access_token(make_token(role="admin"), test_settings)
        assert claims == IdentityClaims(
            subject_id=TEST_USER_ID,
            role="admin",
            username="tester",
            email="tester@example.com",
        )

    def test_sub_claim_fallback(self, test_settings):
        token = make_token(None, sub="user-from-sub")
        assert verify_access_token(token, test_settings).subject_id == "user-from-sub"

    def test_id_claim_wins_over_sub(self, test_settings):
        token = make_token("user-from-id", sub="user-from-sub")
        assert verify_access_token(token, test_settings).subject_id == "user-from-id"

    def test_role_defaults_to_user(self, test_settings):
        token = jwt.encode({"id": "u1"}, TEST_JWT_SECRET, algorithm="HS256")
        claims = verify_access_token(token, test_settings)
        assert claims.role == "user"
        assert claims.username is None

    def test_expired_token(self, test_settings):
        token = make_token(expires_in=timedelta(seconds=-10))
        with pytest.raises(InvalidTokenError, match="expired"):
            verify_access_token(token, test_settings)

    def test_wrong_secret(self, test_settings):
        token = make_token(secret="some-other-secret")
        with pytest.raises(InvalidTokenError):
            verify_access_token(token, test_settings)

    def test_missing_subject(self, test_settings):
        with pytest.raises(InvalidTokenError, match="missing user ID"):
            verify_access_token(make_token(None), test_settings)

    def test_garbage(self, test_settings):
        with pytest.raises(InvalidTokenError):
            verify_access_token("not-a-jwt", test_settings)


@pytest.fixture
def claims_client(test_settings):
    app = FastAPI()

    @app.get("/whoami")
    def whoami(claims: IdentityClaims = Depends(get_current_claims)):
        return {"id": claims.subject_id, "role": claims.role}

    app.dependency_overrides[get_settings] = lambda: test_settings
    return TestClient(app)


class TestGetCurrentClaims:
    """401 for a missing credential, 403 for a bad one."""

    def test_authenticated(self, claims_client):
        response = claims_client.get("/whoami", headers={"Authorization": f"Bearer {make_token()}"})
        assert response.status_code == 200
        assert response.json() == {"id": TEST_USER_ID, "role": "user"}

    def test_missing_header(self, claims_client):
        response = claims_client.get("/whoami")
        assert response.status_code == 401
        assert response.json()["detail"] == "Access token required"

    def test_scheme_word_is_not_checked(self, claims_client):
        response = claims_client.get("/whoami", headers={"Authorization": f"Token {make_token()}"})
        assert response.status_code == 200

    def test_other_scheme_with_bad_token(self, claims_client):
        response = claims_client.get("/whoami", headers={"Authorization": "Token abc"})
        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid token"

    @pytest.mark.parametrize("header", ["Bearer", "abc"])
    def test_no_credential_after_scheme(self, claims_client, header):
        response = claims_client.get("/whoami", headers={"Authorization": header})
        assert response.status_code == 401

    def test_invalid_token(self, claims_client):
        response = claims_client.get("/whoami", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid token"
