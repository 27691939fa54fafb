"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from gpm.interface.dependencies import build_catalog
from gpm.interface.error_handlers import register_error_handlers
from gpm.interface.routes import router
from gpm.services.catalog import Catalog


def create_app(catalog: Catalog | None = None) -> FastAPI:
    """Build and wire the FastAPI application.

    When *catalog* is omitted the configured workspace is scanned once at
    startup.
    """

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.catalog = catalog if catalog is not None else build_catalog()
        yield

    app = FastAPI(
        title="gpm",
        version="1.0.0",
        description="Browse the repositories checked out under a workspace root.",
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
