"""FastAPI dependency wiring."""

from __future__ import annotations

from fastapi import Request

from gpm.infrastructure.config import get_settings
from gpm.services.catalog import Catalog
from gpm.services.walker import Walker


def build_catalog() -> Catalog:
    """Walk the configured workspace root once and return the catalog."""
    settings = get_settings()
    root = settings.resolve_root()
    return Walker(max_repos=settings.max_repos).walk(root)


def get_catalog(request: Request) -> Catalog:
    """Return the catalog attached to the application at startup."""
    catalog: Catalog | None = getattr(request.app.state, "catalog", None)
    assert catalog is not None, "lifespan did not build a catalog"
    return catalog
