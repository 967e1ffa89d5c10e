"""Identity service tests: registration, login and session issue."""

from __future__ import annotations

import re

import pytest

from learn2earn.auth.service import authenticate_user, register_user
from learn2earn.database import Store
from learn2earn.db.models import SYSTEM, TX_REGISTER
from learn2earn.errors import AuthError, ConflictError, ValidationError


class TestRegister:
    def test_register_creates_user_wallet_and_session(self):
        store = Store()
        user, token = register_user(store, "a@b.com", "pw123")

        assert store.users["a@b.com"] is user
        assert store.sessions[token] == "a@b.com"
        assert re.fullmatch(r"0x[0-9a-f]{40}", user.wallet_address)
        wallet = store.wallets[user.wallet_address]
        assert wallet.balance == 0
        assert wallet.tokens == []
        assert wallet.resume_value == 0

    def test_register_appends_one_register_transaction(self):
        store = Store()
        user, _ = register_user(store, "a@b.com", "pw123")

        assert len(store.transactions) == 1
        tx = store.transactions[0]
        assert tx.type == TX_REGISTER
        assert tx.amount == 0
        assert tx.from_ == SYSTEM
        assert tx.to == user.wallet_address
        assert tx.memo == "account created for a@b.com"

    def test_duplicate_email_rejected(self):
        store = Store()
        register_user(store, "a@b.com", "pw123")
        with pytest.raises(ConflictError, match="user exists"):
            register_user(store, "a@b.com", "other")
        assert len(store.users) == 1
        assert len(store.wallets) == 1
        assert len(store.transactions) == 1

    def test_email_is_case_insensitive(self):
        store = Store()
        register_user(store, "Case@Example.COM", "pw123")
        with pytest.raises(ConflictError):
            register_user(store, "case@example.com", "pw123")

    @pytest.mark.parametrize(
        ("email", "password"),
        [(None, "pw"), ("a@b.com", None), ("", "pw"), ("a@b.com", "")],
    )
    def test_missing_fields_rejected(self, email, password):
        store = Store()
        with pytest.raises(ValidationError, match="required"):
            register_user(store, email, password)
        assert store.users == {}

    @pytest.mark.parametrize("email", ["plainaddress", "a@b", "a b@c.com", "@b.com", "a@.com"])
    def test_malformed_email_rejected(self, email):
        store = Store()
        with pytest.raises(ValidationError, match="invalid email"):
            register_user(store, email, "pw123")
        assert store.transactions == []

    def test_display_name_defaults_to_local_part(self):
        store = Store()
        user, _ = register_user(store, "jane.doe@example.com", "pw123", "   ")
        assert user.display_name == "jane.doe"

    def test_default_display_name_keeps_typed_case(self):
        store = Store()
        user, _ = register_user(store, "Alice@Example.com", "pw123")
        assert user.display_name == "Alice"
        assert user.email == "alice@example.com"

    @pytest.mark.parametrize("email", [" a@b.com", "a@b.com ", "a@b.com\n"])
    def test_surrounding_whitespace_rejected(self, email):
        store = Store()
        with pytest.raises(ValidationError, match="invalid email"):
            register_user(store, email, "pw123")
        assert store.users == {}

    def test_display_name_is_trimmed(self):
        store = Store()
        user, _ = register_user(store, "a@b.com", "pw123", "  Alice  ")
        assert user.display_name == "Alice"


class TestLogin:
    def test_login_issues_new_token_and_keeps_old(self):
        store = Store()
        _, t1 = register_user(store, "a@b.com", "pw123")
        user, t2 = authenticate_user(store, "a@b.com", "pw123")

        assert user.email == "a@b.com"
        assert t2 != t1
        assert store.sessions[t1] == "a@b.com"
        assert store.sessions[t2] == "a@b.com"

    def test_wrong_password_adds_no_session(self):
        store = Store()
        register_user(store, "a@b.com", "pw123")
        with pytest.raises(AuthError):
            authenticate_user(store, "a@b.com", "wrongpw")
        assert len(store.sessions) == 1

    def test_password_comparison_is_exact(self):
        store = Store()
        register_user(store, "a@b.com", "pw123")
        with pytest.raises(AuthError):
            authenticate_user(store, "a@b.com", "PW123")

    def test_unknown_user(self):
        store = Store()
        with pytest.raises(AuthError, match="invalid credentials"):
            authenticate_user(store, "nobody@b.com", "pw123")

    def test_malformed_email(self):
        store = Store()
        with pytest.raises(ValidationError):
            authenticate_user(store, "not-an-email", "pw123")

    def test_missing_password(self):
        store = Store()
        with pytest.raises(ValidationError):
            authenticate_user(store, "a@b.com", None)

    def test_login_does_not_touch_ledger(self):
        store = Store()
        register_user(store, "a@b.com", "pw123")
        authenticate_user(store, "a@b.com", "pw123")
        assert len(store.transactions) == 1
