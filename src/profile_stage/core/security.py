"""JWT helpers for identifying the requesting viewer."""
from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta

from jose import jwt

from profile_stage.core.settings import settings


def create_access_token(subject: uuid.UUID | str, extra_claims: dict[str, str] | None = None) -> str:
    """Create a JWT access token for a profile id.

    Production tokens come from the external auth service; this helper
    signs compatible tokens for tests and local tooling.
    """
    to_encode: dict[str, object] = {"sub": str(subject)}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, object]:
    """Decode and verify a JWT access token.

    Raises:
        jose.JWTError: If the token is malformed, expired or badly signed.
    """
    payload: dict[str, object] = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.jwt_algorithm],
    )
    return payload
