"""Response schemas for the user profile endpoint."""

from __future__ import annotations

from learn2earn.db.models import CamelModel, Wallet


class UserResponse(CamelModel):
    """Profile view of a user. The stored password is never included."""

    email: str
    display_name: str
    wallet_address: str
    wallet: Wallet
