"""Authentication router: /api/register and /api/login."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from learn2earn.auth.schemas import LoginRequest, RegisterRequest, TokenResponse
from learn2earn.auth.service import authenticate_user, register_user
from learn2earn.database import Store, get_store

router = APIRouter(prefix="/api", tags=["Authentication"])


@router.post("/register", response_model=TokenResponse)
async def register(
    body: RegisterRequest,
    store: Store = Depends(get_store),
) -> TokenResponse:
    """Register with email + password; creates the wallet and a session."""
    user, token = register_user(
        store,
        email=body.email,
        password=body.password,
        display_name=body.display_name,
    )
    store.commit()
    return TokenResponse(token=token, display_name=user.display_name, wallet_address=user.wallet_address)


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    store: Store = Depends(get_store),
) -> TokenResponse:
    """Login with email + password; issues an additional session token."""
    user, token = authenticate_user(store, email=body.email, password=body.password)
    store.commit()
    return TokenResponse(token=token, display_name=user.display_name, wallet_address=user.wallet_address)
