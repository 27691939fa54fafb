"""Pydantic response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel

from gpm.domain.entities import Repository


class SourcesResponse(BaseModel):
    """Response from ``GET /sources``."""

    sources: list[str]


class OwnersResponse(BaseModel):
    """Response from ``GET /owners``."""

    owners: list[str]


class RepositoryOut(BaseModel):
    name: str
    owner: str
    source: str
    path: str

    @classmethod
    def from_entity(cls, repo: Repository) -> RepositoryOut:
        return cls(name=repo.name, owner=repo.owner, source=repo.source, path=repo.path)


class RepositoriesResponse(BaseModel):
    """Response from ``GET /repos`` — discovery order is preserved."""

    repositories: list[RepositoryOut]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
