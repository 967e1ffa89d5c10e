"""Append-only transaction ledger."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from learn2earn.db.models import Transaction

if TYPE_CHECKING:
    from learn2earn.database import Store

logger = structlog.get_logger()


def _now_ms() -> int:
    return int(time.time() * 1000)


def record_transaction(
    store: Store,
    from_: str,
    to: str,
    amount: float,
    type_: str,
    memo: str = "",
) -> Transaction:
    """Append one transaction and return it.

    Timestamps never go backwards relative to the previous entry, even if the
    wall clock does.
    """
    timestamp = _now_ms()
    if store.transactions:
        timestamp = max(timestamp, store.transactions[-1].timestamp)

    tx = Transaction(
        from_=from_,
        to=to,
        amount=amount,
        type=type_,
        memo=memo,
        timestamp=timestamp,
    )
    store.transactions.append(tx)
    logger.info("transaction_recorded", type=type_, amount=amount, to=to)
    return tx


def transactions_for(store: Store, wallet_address: str) -> list[Transaction]:
    """All transactions sent from or received by ``wallet_address``, in ledger order."""
    return [tx for tx in store.transactions if wallet_address in (tx.from_, tx.to)]
