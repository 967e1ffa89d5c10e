"""Store persistence: load fallbacks, snapshot round-trip, best-effort writes."""

from __future__ import annotations

import json
from pathlib import Path

from learn2earn.auth.service import register_user
from learn2earn.courses.catalog import seed_courses
from learn2earn.database import Store, load_store, persist_store


class TestLoadStore:
    def test_missing_file_gives_empty_store(self, tmp_path: Path):
        store = load_store(tmp_path / "absent.json")
        assert store.users == {}
        assert store.sessions == {}
        assert store.wallets == {}
        assert store.courses == []
        assert store.transactions == []
        assert store.path == tmp_path / "absent.json"

    def test_malformed_json_falls_back_to_empty(self, tmp_path: Path):
        path = tmp_path / "db.json"
        path.write_text("{not json", encoding="utf-8")
        store = load_store(path)
        assert store.users == {}
        assert store.courses == []

    def test_wrong_shape_falls_back_to_empty(self, tmp_path: Path):
        path = tmp_path / "db.json"
        path.write_text(json.dumps({"users": ["not", "a", "map"]}), encoding="utf-8")
        store = load_store(path)
        assert store.users == {}

    def test_partial_document_fills_defaults(self, tmp_path: Path):
        """Older data files without a transactions key still load."""
        path = tmp_path / "db.json"
        path.write_text(json.dumps({"users": {}, "sessions": {}, "wallets": {}, "courses": []}), encoding="utf-8")
        store = load_store(path)
        assert store.transactions == []


class TestRoundTrip:
    def test_persist_then_load_is_equivalent(self, tmp_path: Path):
        path = tmp_path / "db.json"
        store = Store()
        seed_courses(store)
        register_user(store, "a@b.com", "pw123")
        register_user(store, "c@d.org", "secret", "Carol")

        assert persist_store(store, path) is True
        reloaded = load_store(path)

        assert reloaded.model_dump() == store.model_dump()

    def test_document_layout_uses_camel_case_keys(self, tmp_path: Path):
        path = tmp_path / "db.json"
        store = Store()
        seed_courses(store)
        user, _ = register_user(store, "a@b.com", "pw123")
        persist_store(store, path)

        doc = json.loads(path.read_text(encoding="utf-8"))
        assert set(doc) == {"users", "sessions", "wallets", "courses", "transactions"}
        assert doc["users"]["a@b.com"]["walletAddress"] == user.wallet_address
        assert doc["users"]["a@b.com"]["displayName"] == "a"
        assert doc["wallets"][user.wallet_address]["resumeValue"] == 0
        assert doc["transactions"][0]["from"] == "SYSTEM"
        mcq_course = next(c for c in doc["courses"] if c["type"] == "mcq")
        assert "q" in mcq_course["mcqs"][0]
        assert "platformInitial" in mcq_course

    def test_commit_writes_to_bound_path(self, tmp_path: Path):
        path = tmp_path / "nested" / "db.json"
        store = load_store(path)
        register_user(store, "a@b.com", "pw123")
        assert store.commit() is True
        assert "a@b.com" in load_store(path).users


class TestPersistFailures:
    def test_unbound_store_commit_is_noop(self):
        assert Store().commit() is False

    def test_write_failure_is_swallowed(self, tmp_path: Path):
        target = tmp_path / "db.json"
        target.mkdir()  # a directory cannot be replaced by a file
        store = Store()
        register_user(store, "a@b.com", "pw123")

        assert persist_store(store, target) is False
        assert target.is_dir()
        assert list(tmp_path.glob(".db.json.*")) == []
