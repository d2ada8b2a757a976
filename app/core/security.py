"""Bearer-token authentication.

Extracts the calling principal from an ``Authorization: Bearer <jwt>`` header.
The principal is handed to route handlers as a dependency and passed on to
service calls explicitly; nothing about the caller is stored on a service.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from app.core.config import settings
from app.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

# auto_error=False so missing credentials go through our 401 envelope
bearer_scheme = HTTPBearer(auto_error=False, scheme_name="BearerAuth")


class Principal(BaseModel):
    """Authenticated caller."""

    object_id: str
    upn: Optional[str] = None
    name: Optional[str] = None

    @property
    def display(self) -> str:
        return self.upn or self.object_id


def decode_principal(token: str) -> Principal:
    """Validate *token* and build a :class:`Principal` from its claims."""
    options = {"verify_aud": bool(settings.auth_jwt_audience)}
    try:
        claims = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=[settings.auth_jwt_algorithm],
            audience=settings.auth_jwt_audience,
            issuer=settings.auth_jwt_issuer,
            options=options,
        )
    except JWTError as exc:
        logger.info("Rejected bearer token: %s", exc)
        raise UnauthorizedError("Authentication token is invalid or expired") from exc

    object_id = claims.get("oid") or claims.get("sub")
    if not object_id:
        raise UnauthorizedError("Authentication token does not identify a user")

    return Principal(
        object_id=object_id,
        upn=claims.get("upn") or claims.get("preferred_username") or claims.get("email"),
        name=claims.get("name"),
    )


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    """FastAPI dependency: the principal behind the request's bearer token."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authentication token required")
    return decode_principal(credentials.credentials)
