"""Wallet operations: balance reads, resume evaluation, peer transfers and verification payouts."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import structlog

from learn2earn.auth.service import get_user_by_email
from learn2earn.db.models import SYSTEM, TX_TRANSFER, TX_VERIFY, CamelModel, EarnedToken, Transaction, Wallet
from learn2earn.errors import ConflictError, NotFoundError, ValidationError
from learn2earn.wallet.ledger import record_transaction

if TYPE_CHECKING:
    from learn2earn.database import Store

logger = structlog.get_logger()


class ResumeEvaluation(CamelModel):
    wallet_address: str
    resume_value: int
    verified_value: int
    token_count: int
    verified_count: int
    unverified_count: int
    tokens: list[EarnedToken]


def get_wallet(store: Store, email: str) -> Wallet:
    """Return the wallet owned by ``email``."""
    user = store.users.get(email)
    if user is None or user.wallet_address not in store.wallets:
        raise NotFoundError("wallet not found")
    return store.wallets[user.wallet_address]


def evaluate_resume(store: Store, email: str) -> ResumeEvaluation:
    """
    Summarise the credentials in a wallet.

    ``verified_value`` counts only tokens another user has verified, so it is
    never more than ``resume_value``.
    """
    wallet = get_wallet(store, email)
    verified = [token for token in wallet.tokens if token.verified]
    return ResumeEvaluation(
        wallet_address=wallet.wallet_address,
        resume_value=wallet.resume_value,
        verified_value=sum(token.token_value for token in verified),
        token_count=len(wallet.tokens),
        verified_count=len(verified),
        unverified_count=len(wallet.tokens) - len(verified),
        tokens=list(wallet.tokens),
    )


def _resolve_recipient(store: Store, to: str | None) -> Wallet:
    """Accept either a wallet address or a registered email."""
    to = (to or "").strip()
    if not to:
        raise ValidationError("recipient required")
    if to in store.wallets:
        return store.wallets[to]
    user = get_user_by_email(store, to)
    if user is not None and user.wallet_address in store.wallets:
        return store.wallets[user.wallet_address]
    raise ValidationError("recipient wallet not found")


def transfer(
    store: Store,
    sender_email: str,
    to: str | None,
    amount: float | None,
    memo: str | None = None,
) -> Transaction:
    """
    Move ``amount`` from the sender's wallet to the recipient's.

    Raises:
        ValidationError: On a bad amount, unknown recipient, self-transfer or
            insufficient balance.
    """
    if amount is None or not math.isfinite(amount) or amount <= 0:
        raise ValidationError("amount must be a positive number")

    sender = get_wallet(store, sender_email)
    recipient = _resolve_recipient(store, to)
    if recipient.wallet_address == sender.wallet_address:
        raise ValidationError("cannot transfer to your own wallet")
    if sender.balance < amount:
        raise ValidationError("insufficient balance")

    sender.balance -= amount
    recipient.balance += amount
    return record_transaction(
        store,
        from_=sender.wallet_address,
        to=recipient.wallet_address,
        amount=amount,
        type_=TX_TRANSFER,
        memo=(memo or "").strip() or f"transfer from {sender_email}",
    )


def verify_token(
    store: Store,
    verifier_email: str,
    wallet_address: str | None,
    course_id: str | None,
    payout: float,
) -> tuple[Transaction, EarnedToken]:
    """
    Verify a course token held by another wallet and pay its holder.

    Raises:
        ValidationError: If input is missing or the verifier owns the wallet.
        NotFoundError: If the wallet or the token does not exist.
        ConflictError: If the token was already verified.
    """
    if not wallet_address or not course_id:
        raise ValidationError("walletAddress & courseId required")

    verifier = get_wallet(store, verifier_email)
    if wallet_address == verifier.wallet_address:
        raise ValidationError("cannot verify your own token")

    holder = store.wallets.get(wallet_address)
    if holder is None:
        raise NotFoundError("wallet not found")
    token = holder.find_token(course_id)
    if token is None:
        raise NotFoundError("token not found")
    if token.verified:
        raise ConflictError("token already verified")

    token.verified = True
    token.verified_by = verifier.wallet_address
    holder.balance += payout
    tx = record_transaction(
        store,
        from_=SYSTEM,
        to=holder.wallet_address,
        amount=payout,
        type_=TX_VERIFY,
        memo=f"{token.title} verified by {verifier.wallet_address}",
    )
    logger.info("token_verified", course_id=course_id, holder=holder.wallet_address)
    return tx, token
