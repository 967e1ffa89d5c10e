"""Request schemas for wallet endpoints."""

from __future__ import annotations

from learn2earn.db.models import CamelModel


class TransferRequest(CamelModel):
    """Peer transfer. ``to`` is a wallet address or a registered email."""

    to: str | None = None
    amount: float | None = None
    memo: str | None = None


class VerifyRequest(CamelModel):
    wallet_address: str | None = None
    course_id: str | None = None
