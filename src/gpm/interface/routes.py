"""API routes — thin read-only controllers over the catalog."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gpm.interface.dependencies import get_catalog
from gpm.interface.schemas import (
    ErrorResponse,
    OwnersResponse,
    RepositoriesResponse,
    RepositoryOut,
    SourcesResponse,
)
from gpm.services.catalog import Catalog

router = APIRouter()


@router.get("/sources", response_model=SourcesResponse)
async def list_sources(catalog: Catalog = Depends(get_catalog)) -> SourcesResponse:
    """List every hosting source in the workspace."""
    return SourcesResponse(sources=sorted(catalog.sources()))


@router.get("/owners", response_model=OwnersResponse)
async def list_owners(
    source: str | None = None,
    catalog: Catalog = Depends(get_catalog),
) -> OwnersResponse:
    """List owners, optionally for a single source."""
    return OwnersResponse(owners=sorted(catalog.owners(source=source)))


@router.get("/repos", response_model=RepositoriesResponse)
async def list_repos(
    source: str | None = None,
    owner: str | None = None,
    catalog: Catalog = Depends(get_catalog),
) -> RepositoriesResponse:
    """List repositories in discovery order, optionally filtered."""
    repos = catalog.repositories(source=source, owner=owner)
    return RepositoriesResponse(repositories=[RepositoryOut.from_entity(r) for r in repos])


@router.get(
    "/repos/{name:path}",
    response_model=RepositoryOut,
    responses={
        404: {"model": ErrorResponse, "description": "No repository with that name"},
        409: {"model": ErrorResponse, "description": "Name matches more than one repository"},
    },
)
async def get_repo(name: str, catalog: Catalog = Depends(get_catalog)) -> RepositoryOut:
    """Resolve a repository by name, ``owner/name`` or ``source/owner/name``."""
    return RepositoryOut.from_entity(catalog.resolve(name))
