"""
Authentication module for access tokens issued by the auth service.
Provides FastAPI dependencies for securing endpoints.

Tokens are HS256 JWTs signed with the shared secret from settings. The
subject is carried in the ``id`` claim (``sub`` is accepted as a fallback),
together with ``username``, ``email`` and ``role``.

Failure modes are reported differently on purpose:
- no credential at all -> 401 "Access token required"
- a credential that cannot be verified -> 403 "Invalid token"
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, Header, HTTPException

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

MISSING_TOKEN_DETAIL = "Access token required"
INVALID_TOKEN_DETAIL = "Invalid token"


class InvalidTokenError(Exception):
    """The credential could not be verified or carries no subject."""


@dataclass(frozen=True)
class IdentityClaims:
    """Verified identity of the caller."""

    subject_id: str
    role: str = "user"
    username: Optional[str] = None
    email: Optional[str] = None


def verify_access_token(token: str, settings: Settings) -> IdentityClaims:
    """
    Verify signature and expiry of an access token and extract its claims.

    Raises:
        InvalidTokenError: If the token is malformed, expired, badly signed
            or has no subject
    """
    try:
        payload: Dict[str, Any] = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"verify_aud": False},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(str(e)) from e

    subject = payload.get("id") or payload.get("sub")
    if not subject:
        raise InvalidTokenError("Token missing user ID")

    return IdentityClaims(
        subject_id=str(subject),
        role=payload.get("role") or "user",
        username=payload.get("username"),
        email=payload.get("email"),
    )


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    _, _, token = authorization.partition(" ")
    return token.strip() or None


def get_current_claims(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> IdentityClaims:
    """
    Authenticate via bearer token and return the verified claims.

    Usage:
        @router.get("/protected")
        def protected_route(claims: IdentityClaims = Depends(get_current_claims)):
            return {"role": claims.role}
    """
    token = _bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=401, detail=MISSING_TOKEN_DETAIL)
    try:
        return verify_access_token(token, settings)
    except InvalidTokenError as e:
        logger.warning(f"Rejected access token: {e}")
        raise HTTPException(status_code=403, detail=INVALID_TOKEN_DETAIL)


def get_current_user(claims: IdentityClaims = Depends(get_current_claims)) -> str:
    """
    Authenticate via bearer token and return the subject id.

    Usage:
        @router.get("/protected")
        def protected_route(user_id: str = Depends(get_current_user)):
            return {"user_id": user_id}
    """
    return claims.subject_id
