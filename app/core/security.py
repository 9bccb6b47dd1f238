# app/core/security.py
"""
JWT helpers for the admin-only room routes.

Token issuance belongs to the identity service; this module only mints
tokens for tooling and tests and decodes the bearer tokens callers send.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import ExpiredSignatureError, JWTError, jwt

from app.config.settings import settings
from app.core.exceptions import AuthenticationError


@dataclass(frozen=True)
class JWTSettings:
    """JWT configuration settings."""
    secret_key: str
    algorithm: str = "HS256"
    access_token_expires_minutes: int = 60

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ValueError("JWT secret_key cannot be empty")


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller extracted from a bearer token."""
    id: str
    role: str


def get_jwt_settings() -> JWTSettings:
    return JWTSettings(
        secret_key=settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def create_access_token(
    subject: str,
    role: str,
    jwt_settings: Optional[JWTSettings] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed access token.

    Args:
        subject: User identifier stored in the ``sub`` claim
        role: Role name stored in the ``role`` claim
        jwt_settings: JWT configuration, defaults to application settings
        expires_delta: Token lifetime override

    Returns:
        Encoded JWT string
    """
    jwt_settings = jwt_settings or get_jwt_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=jwt_settings.access_token_expires_minutes)
    )
    payload = {"sub": subject, "role": role, "exp": expire}
    return jwt.encode(payload, jwt_settings.secret_key, algorithm=jwt_settings.algorithm)


def decode_token(token: str, jwt_settings: Optional[JWTSettings] = None) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Raises:
        AuthenticationError: If the token is expired, malformed or has a bad signature
    """
    jwt_settings = jwt_settings or get_jwt_settings()
    try:
        return jwt.decode(token, jwt_settings.secret_key, algorithms=[jwt_settings.algorithm])
    except ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired") from e
    except JWTError as e:
        raise AuthenticationError("Invalid authentication token") from e


def user_from_token(token: str, jwt_settings: Optional[JWTSettings] = None) -> CurrentUser:
    payload = decode_token(token, jwt_settings)
    user_id = payload.get("sub") or payload.get("user_id")
    role = payload.get("role")
    if not user_id or not role:
        raise AuthenticationError("Invalid token payload")
    return CurrentUser(id=str(user_id), role=str(role))
