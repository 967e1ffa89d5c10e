"""Health, readiness, and version endpoints."""

import os

from fastapi import APIRouter, Depends

from learn2earn.config import get_settings
from learn2earn.database import Store, get_store

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe — returns 200 if the process is alive."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness(store: Store = Depends(get_store)) -> dict[str, object]:
    """Readiness probe. Checks the catalog is loaded and the data directory is writable."""
    checks: dict[str, object] = {}

    checks["catalog"] = "ok" if store.courses else "error: catalog empty"

    path = store.path
    if path is None:
        checks["storage"] = "error: no data file bound"
    elif os.access(path.parent, os.W_OK):
        checks["storage"] = "ok"
    else:
        checks["storage"] = f"error: {path.parent} not writable"

    all_ok = all(v == "ok" for v in checks.values())
    return {"status": "ready" if all_ok else "degraded", "checks": checks}


@router.get("/version")
async def version() -> dict[str, str]:
    """Return API version and environment."""
    settings = get_settings()
    return {
        "version": settings.app_version,
        "environment": settings.environment,
    }
