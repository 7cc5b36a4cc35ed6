"""
Authentication utilities.
Mints and verifies HS256 JWTs for registered users.

The signing key, issuer and audience are read from settings at request time.
When any of them is missing every token operation fails with a 500 rather
than crashing the process.
"""

from __future__ import annotations

import base64
import binascii
import time
from typing import Any

import jwt
from fastapi import Depends, Header

from reservation_shared.config.logging import get_logger
from reservation_shared.config.settings import Settings, get_settings
from reservation_shared.utils.exceptions import ConfigurationMissingError, UnauthorizedError

logger = get_logger(__name__)

ALGORITHM = "HS256"


def get_signing_key(settings: Settings) -> bytes:
    """
    Decode the base64 signing key.

    Raises:
        ConfigurationMissingError: If the key, issuer or audience is missing,
            or the key is not valid base64.
    """
    if not settings.jwt_configured:
        raise ConfigurationMissingError(
            has_key=bool(settings.secret_key),
            has_issuer=bool(settings.issuer),
            has_audience=bool(settings.audience),
        )
    try:
        key = base64.b64decode(settings.secret_key, validate=True)
    except (binascii.Error, ValueError):
        raise ConfigurationMissingError(reason="SECRET_KEY is not valid base64")
    if not key:
        raise ConfigurationMissingError(reason="SECRET_KEY decodes to an empty key")
    return key


def sign_jwt(
    payload: dict[str, Any],
    settings: Settings,
    ttl_seconds: int | None = None,
) -> str:
    """
    Sign a JWT token with the given payload.

    Args:
        payload: Claims to include in the token (sub, name, user_id).
        settings: Settings providing key, issuer, audience and default lifetime.
        ttl_seconds: Token lifetime in seconds. Defaults to JWT_EXPIRE_MINUTES.

    Returns:
        Signed JWT token string.
    """
    key = get_signing_key(settings)
    if ttl_seconds is None:
        ttl_seconds = settings.jwt_expire_minutes * 60

    now = int(time.time())
    data = {
        **payload,
        "iss": settings.issuer,
        "aud": settings.audience,
        "iat": now,
        "exp": now + ttl_seconds,
    }
    return jwt.encode(data, key, algorithm=ALGORITHM)


def verify_jwt(token: str, settings: Settings) -> dict[str, Any]:
    """
    Verify and decode a JWT token.

    Signature, issuer, audience and expiry are all checked with no clock skew.

    Raises:
        ConfigurationMissingError: If signing configuration is absent.
        UnauthorizedError: If the token is invalid or expired.
    """
    key = get_signing_key(settings)
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[ALGORITHM],
            audience=settings.audience,
            issuer=settings.issuer,
            options={"require": ["exp", "iss", "aud", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except jwt.InvalidTokenError as e:
        # Generic message to the client, the reason stays in the log
        raise UnauthorizedError("Invalid token", error=str(e))

    try:
        int(payload["sub"])
    except (ValueError, TypeError):
        raise UnauthorizedError("Invalid token: malformed subject claim")

    return payload


def get_bearer_token(authorization: str | None) -> str:
    """
    Extract bearer token from Authorization header.

    Raises:
        UnauthorizedError: If header is missing or malformed.
    """
    if not authorization:
        raise UnauthorizedError("Missing Authorization header")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedError("Invalid Authorization header format. Expected: Bearer <token>")
    return token.strip()


def current_user(
    authorization: str | None = Header(default=None, alias="Authorization"),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """
    FastAPI dependency returning the verified token claims.

    Usage:
        @router.get("/protected")
        def protected_endpoint(user: dict = Depends(current_user)):
            user_id = int(user["sub"])
    """
    # Misconfiguration is reported before the caller's credentials are judged
    get_signing_key(settings)
    token = get_bearer_token(authorization)
    return verify_jwt(token, settings)
