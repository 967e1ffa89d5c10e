"""Session guard for protected routes."""

from __future__ import annotations

import structlog
from fastapi import Depends, Header

from learn2earn.database import Store, get_store
from learn2earn.db.models import User
from learn2earn.errors import AuthError

_BEARER_PREFIX = "Bearer "


def extract_token(header: str | None) -> str:
    """Take the token from ``Bearer <token>``, or the whole value without the prefix."""
    header = header or ""
    if header.startswith(_BEARER_PREFIX):
        return header[len(_BEARER_PREFIX):].strip()
    return header.strip()


def authenticate(store: Store, header: str | None) -> str:
    """
    Resolve an Authorization header to the session's email.

    Raises:
        AuthError: If the token is empty or not an active session.
    """
    token = extract_token(header)
    email = store.sessions.get(token) if token else None
    if email is None or email not in store.users:
        raise AuthError("unauthorized")
    return email


async def get_current_email(
    authorization: str | None = Header(default=None),
    store: Store = Depends(get_store),
) -> str:
    """Authenticate the request and bind the caller's email to the log context."""
    email = authenticate(store, authorization)
    structlog.contextvars.bind_contextvars(email=email)
    return email


async def get_current_user(
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> User:
    """Same as get_current_email but returns the User record."""
    return store.users[email]
