"""User profile endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from learn2earn.auth.dependencies import get_current_user
from learn2earn.database import Store, get_store
from learn2earn.db.models import User
from learn2earn.users.schemas import UserResponse
from learn2earn.wallet.service import get_wallet

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/me", response_model=UserResponse)
async def me(
    user: User = Depends(get_current_user),
    store: Store = Depends(get_store),
) -> UserResponse:
    """Current user's profile and wallet."""
    return UserResponse(
        email=user.email,
        display_name=user.display_name,
        wallet_address=user.wallet_address,
        wallet=get_wallet(store, user.email),
    )
