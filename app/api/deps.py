# app/api/deps.py
import logging
from typing import Optional

import jwt
from fastapi import Header

from app.core.errors import AuthError
from app.core.security import decode_access_token

logger = logging.getLogger(__name__)

def authenticate(raw_header: Optional[str]) -> int:
    """
    Resolve an `Authorization: Bearer <token>` header to a user id.

    Raises AuthError("No token provided") when there is no token and
    AuthError("Invalid token") when it is malformed, tampered with or expired.
    """
    parts = (raw_header or "").split()
    if len(parts) < 2:
        raise AuthError("No token provided")

    scheme, token = parts[0], parts[1]
    if scheme.lower() != "bearer" or len(parts) != 2:
        raise AuthError("Invalid token")

    try:
        payload = decode_access_token(token)
    except jwt.ExpiredSignatureError:
        logger.debug("Rejected expired token")
        raise AuthError("Invalid token")
    except jwt.InvalidTokenError:
        logger.debug("Rejected token with bad signature or shape")
        raise AuthError("Invalid token")

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise AuthError("Invalid token")

async def get_current_user_id(
    authorization: Optional[str] = Header(default=None),
) -> int:
    """Dependency guarding every owner-scoped route."""
    return authenticate(authorization)
