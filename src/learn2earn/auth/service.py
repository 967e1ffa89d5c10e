"""
Identity business logic.

Handles registration, login and session issue. Passwords are stored and
compared in clear and sessions never expire; both are known gaps of this
service's scope.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from learn2earn.auth.tokens import make_session_token, make_wallet_address
from learn2earn.db.models import SYSTEM, TX_REGISTER, User, Wallet
from learn2earn.errors import AuthError, ConflictError, ValidationError
from learn2earn.wallet.ledger import record_transaction

if TYPE_CHECKING:
    from learn2earn.database import Store

logger = structlog.get_logger()

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def normalize_email(email: str | None) -> str:
    """Validate an email's basic shape and lower-case it.

    Raises:
        ValidationError: If the email is missing or malformed.
    """
    if not email:
        msg = "email & password required"
        raise ValidationError(msg)
    if not EMAIL_REGEX.fullmatch(email):
        msg = "invalid email format"
        raise ValidationError(msg)
    return email.lower()


def resolve_display_name(local_part: str, display_name: str | None) -> str:
    """Use the trimmed display name, or the email's local part as typed when blank."""
    if display_name and display_name.strip():
        return display_name.strip()
    return local_part


def get_user_by_email(store: Store, email: str) -> User | None:
    return store.users.get(email.lower())


def issue_session(store: Store, email: str) -> str:
    """Create a new bearer token for ``email``. Earlier tokens stay valid."""
    token = make_session_token()
    while token in store.sessions:
        token = make_session_token()
    store.sessions[token] = email
    logger.info("session_issued", email=email)
    return token


def _new_wallet_address(store: Store) -> str:
    address = make_wallet_address()
    while address in store.wallets:
        address = make_wallet_address()
    return address


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register_user(
    store: Store,
    email: str | None,
    password: str | None,
    display_name: str | None = None,
) -> tuple[User, str]:
    """
    Register a new user with a fresh wallet and session.

    Returns:
        Tuple of (user, session_token).

    Raises:
        ValidationError: If email/password is missing or email is malformed.
        ConflictError: If the email is already registered.
    """
    if not email or not password:
        msg = "email & password required"
        raise ValidationError(msg)
    local_part = email.split("@")[0]
    email = normalize_email(email)

    if email in store.users:
        msg = "user exists, please login"
        raise ConflictError(msg)

    wallet_address = _new_wallet_address(store)
    user = User(
        email=email,
        password=password,
        display_name=resolve_display_name(local_part, display_name),
        wallet_address=wallet_address,
    )
    store.users[email] = user
    store.wallets[wallet_address] = Wallet(wallet_address=wallet_address)

    token = issue_session(store, email)

    record_transaction(
        store,
        from_=SYSTEM,
        to=wallet_address,
        amount=0,
        type_=TX_REGISTER,
        memo=f"account created for {email}",
    )
    logger.info("user_registered", email=email, wallet_address=wallet_address)
    return user, token


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


def authenticate_user(store: Store, email: str | None, password: str | None) -> tuple[User, str]:
    """
    Authenticate with email + password and issue a new session.

    Raises:
        ValidationError: If input is missing or the email is malformed.
        AuthError: If the user is unknown or the password does not match.
    """
    if not email or not password:
        msg = "email & password required"
        raise ValidationError(msg)
    email = normalize_email(email)

    user = store.users.get(email)
    if user is None or user.password != password:
        logger.info("login_failed", email=email)
        msg = "invalid credentials"
        raise AuthError(msg)

    token = issue_session(store, email)
    return user, token
