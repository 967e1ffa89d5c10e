"""Wallet and ledger endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from learn2earn.auth.dependencies import get_current_email
from learn2earn.config import get_settings
from learn2earn.database import Store, get_store
from learn2earn.wallet.ledger import transactions_for
from learn2earn.wallet.schemas import TransferRequest, VerifyRequest
from learn2earn.wallet.service import evaluate_resume, get_wallet, transfer, verify_token

router = APIRouter(prefix="/api", tags=["Wallet"])


@router.get("/wallet")
async def wallet(
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """Caller's wallet: balance, earned tokens and resume value."""
    return get_wallet(store, email).model_dump(by_alias=True)


@router.get("/resume")
async def resume(
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """Resume value of the caller's earned tokens, split by verification."""
    return evaluate_resume(store, email).model_dump(by_alias=True)


@router.get("/transactions")
async def transactions(
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """Ledger entries touching the caller's wallet, oldest first."""
    address = get_wallet(store, email).wallet_address
    return {"transactions": [tx.model_dump(by_alias=True) for tx in transactions_for(store, address)]}


@router.post("/transfer")
async def transfer_tokens(
    body: TransferRequest,
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """Send balance to another wallet."""
    tx = transfer(store, email, to=body.to, amount=body.amount, memo=body.memo)
    store.commit()
    return {
        "transaction": tx.model_dump(by_alias=True),
        "balance": get_wallet(store, email).balance,
    }


@router.post("/verify")
async def verify(
    body: VerifyRequest,
    email: str = Depends(get_current_email),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """Verify another user's course token; the holder receives the payout."""
    tx, token = verify_token(
        store,
        email,
        wallet_address=body.wallet_address,
        course_id=body.course_id,
        payout=get_settings().verify_payout,
    )
    store.commit()
    return {
        "transaction": tx.model_dump(by_alias=True),
        "token": token.model_dump(by_alias=True),
    }
