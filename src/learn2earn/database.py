"""JSON-file backed store and its lifecycle."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import structlog
from fastapi import Request
from pydantic import Field, PrivateAttr

from learn2earn.db.models import CamelModel, Course, Transaction, User, Wallet

logger = structlog.get_logger()


class Store(CamelModel):
    """The whole persisted state, held in memory for the process lifetime."""

    users: dict[str, User] = Field(default_factory=dict)
    sessions: dict[str, str] = Field(default_factory=dict)
    wallets: dict[str, Wallet] = Field(default_factory=dict)
    courses: list[Course] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)

    _path: Path | None = PrivateAttr(default=None)

    @property
    def path(self) -> Path | None:
        return self._path

    def bind(self, path: str | os.PathLike[str]) -> None:
        """Attach the data file that ``commit`` writes to."""
        self._path = Path(path)

    def commit(self) -> bool:
        """Best-effort flush of the full snapshot to the bound data file."""
        if self._path is None:
            return False
        return persist_store(self, self._path)


def load_store(path: str | os.PathLike[str]) -> Store:
    """Load the store from ``path``, falling back to an empty store.

    A missing file is the normal first-run case. Unreadable or malformed data
    is logged and replaced by an empty store; startup never aborts here.
    """
    path = Path(path)
    store = Store()
    if path.exists():
        try:
            store = Store.model_validate_json(path.read_bytes())
        except (OSError, ValueError) as e:
            logger.warning("store_load_failed", path=str(path), error=str(e))
            store = Store()
        else:
            logger.info(
                "store_loaded",
                path=str(path),
                users=len(store.users),
                transactions=len(store.transactions),
            )
    store.bind(path)
    return store


def persist_store(store: Store, path: str | os.PathLike[str]) -> bool:
    """Write a full snapshot of ``store`` to ``path``.

    The snapshot goes to a sibling temp file first and is renamed over the
    target, so readers never see a half-written document. Failures are logged
    and reported through the return value only.
    """
    path = Path(path)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(store.model_dump_json(by_alias=True, indent=2))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        logger.warning("store_persist_failed", path=str(path), error=str(e))
        return False
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
    return True


def get_store(request: Request) -> Store:
    """Return the application's store (FastAPI dependency)."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        msg = "Store not initialized. The application lifespan has not run."
        raise RuntimeError(msg)
    return store
