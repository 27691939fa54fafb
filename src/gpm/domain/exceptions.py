"""Domain exception hierarchy.

Inner layers raise these; the CLI turns them into exit codes and the HTTP
error handlers turn them into status codes.
"""

from __future__ import annotations


class GpmError(Exception):
    """Base exception for the entire application."""


# ── Configuration ───────────────────────────────────────────────────────────


class ConfigurationError(GpmError):
    """The workspace root is empty, missing, or not a directory."""


# ── Traversal ───────────────────────────────────────────────────────────────


class MalformedPathError(GpmError):
    """A repository path has fewer than three segments beneath the root."""

    def __init__(self, path: str, segments: int) -> None:
        super().__init__(
            f"Cannot decompose '{path}': expected source/owner/repo, "
            f"found {segments} segment(s)"
        )
        self.path = path
        self.segments = segments


# ── Lookup ──────────────────────────────────────────────────────────────────


class RepositoryNotFoundError(GpmError):
    """No catalogued repository matches the requested name."""


class AmbiguousRepositoryError(GpmError):
    """More than one catalogued repository matches the requested name."""
