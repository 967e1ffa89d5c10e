"""Random identifiers for wallets and sessions."""

from __future__ import annotations

import secrets

WALLET_ADDRESS_HEX_LENGTH = 40


def make_wallet_address() -> str:
    """Return ``0x`` followed by 40 lowercase hex characters."""
    return "0x" + secrets.token_hex(WALLET_ADDRESS_HEX_LENGTH // 2)


def make_session_token() -> str:
    """Return an opaque bearer token."""
    return "token-" + secrets.token_hex(16)
