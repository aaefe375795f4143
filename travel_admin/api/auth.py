"""Admin access dependency for the FastAPI routers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from jose import JWTError, jwt

from .. import config

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AdminContext:
    """Who is calling, and whether they may use admin endpoints."""

    is_admin: bool
    user_email: Optional[str] = None
    user_id: Optional[str] = None


def _token_from_request(request: Request) -> Optional[str]:
    token = request.cookies.get("access_token")
    if token:
        return token
    header = request.headers.get("Authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def decode_access_token(token: str) -> dict:
    """Decode and validate a session JWT.

    Raises:
        jose.JWTError if token invalid/expired
    """
    return jwt.decode(token, config.JWT_SECRET_KEY, algorithms=[config.JWT_ALGORITHM])


async def ensure_admin(request: Request) -> AdminContext:
    """Resolve the caller's admin status; never raises."""
    token = _token_from_request(request)
    if not token:
        return AdminContext(is_admin=False)

    try:
        payload = decode_access_token(token)
    except JWTError as exc:
        logger.warning("Rejected session token: %s", exc)
        return AdminContext(is_admin=False)

    email = payload.get("email")
    user_id = payload.get("sub")
    is_admin = payload.get("admin") is True or (
        bool(email) and str(email).lower() in config.ADMIN_EMAILS
    )
    return AdminContext(is_admin=is_admin, user_email=email, user_id=user_id)

__all__ = ["AdminContext", "ensure_admin", "decode_access_token"]
