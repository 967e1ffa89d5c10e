"""Request/response schemas for authentication endpoints."""

from __future__ import annotations

from learn2earn.db.models import CamelModel


class RegisterRequest(CamelModel):
    """Registration body. Fields are optional so missing values surface as 400s."""

    email: str | None = None
    password: str | None = None
    display_name: str | None = None


class LoginRequest(CamelModel):
    email: str | None = None
    password: str | None = None


class TokenResponse(CamelModel):
    """Session issued after register or login."""

    token: str
    display_name: str
    wallet_address: str
