"""Port: repository classifier — defined by the domain, used by the walker."""

from __future__ import annotations

from typing import Protocol


class RepoClassifier(Protocol):
    """Abstract contract for recognising and naming repository roots."""

    def is_repository_root(self, path: str) -> bool:
        """Return *True* if *path* is a directory holding VCS metadata."""
        ...

    def decompose(self, path: str) -> tuple[str, str, str]:
        """Return the ``(source, owner, repo)`` identity of *path*."""
        ...
