"""Bearer token verification for tokens issued by the auth provider."""
from __future__ import annotations

from typing import Any, Dict
from uuid import UUID

import jwt
from fastapi import Header

from linkhub.core.config import settings
from linkhub.core.exceptions import AuthenticationError


def require_auth(authorization: str | None = Header(default=None)) -> Dict[str, Any]:
    """Validate a bearer token and return the user id with decoded claims."""

    if not authorization or not authorization.lower().startswith("bearer "):
        raise AuthenticationError("Missing bearer token")

    token = authorization.split(" ", 1)[1].strip()
    options = {"verify_aud": settings.JWT_AUDIENCE is not None}
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
            audience=settings.JWT_AUDIENCE,
            options=options,
        )
    except jwt.InvalidTokenError as exc:
        raise AuthenticationError("Invalid token") from exc

    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("User missing in token")

    try:
        user_uuid = UUID(str(subject))
    except ValueError as exc:
        raise AuthenticationError("Invalid user identifier") from exc

    return {"user_id": user_uuid, "claims": payload}
