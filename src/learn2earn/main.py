"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from learn2earn.auth.router import router as auth_router
from learn2earn.config import get_settings
from learn2earn.courses.catalog import seed_courses
from learn2earn.courses.router import router as courses_router
from learn2earn.database import Store, load_store
from learn2earn.health.router import router as health_router
from learn2earn.middleware import setup_middleware
from learn2earn.users.router import router as users_router
from learn2earn.wallet.router import router as wallet_router

logger = structlog.get_logger()


def open_store(data_file: str) -> Store:
    """Load the store and seed the catalog on first run."""
    store = load_store(data_file)
    if seed_courses(store):
        store.commit()
    return store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    settings = get_settings()
    app.state.store = open_store(settings.data_file)

    yield

    if not app.state.store.commit():
        logger.warning("store_flush_on_shutdown_failed", path=settings.data_file)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Learn2Earn Hub API",
        description="Backend API for Learn2Earn Hub: earn tokens by completing courses",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(wallet_router)
    app.include_router(courses_router)

    return app


app = create_app()
