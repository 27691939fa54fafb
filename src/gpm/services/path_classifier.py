"""Path classification — recognise repository roots and name them."""

from __future__ import annotations

import os

from gpm.domain.exceptions import MalformedPathError

VCS_MARKER = ".git"


def _split(path: str) -> list[str]:
    """Split *path* on the platform separator, dropping empty segments."""
    normalised = os.path.normpath(path)
    if normalised in (os.curdir, os.sep):
        return []
    return [part for part in normalised.split(os.sep) if part]


class PathClassifier:
    """Decide whether a directory is a repository root and decompose its path.

    Parameters
    ----------
    root:
        Workspace root the decomposed paths live under.  When given, only
        the segments *beneath* it count towards the ``source/owner/repo``
        triple; otherwise the whole path is used.
    marker:
        Name of the metadata directory that marks a repository root.
    """

    def __init__(self, root: str | None = None, marker: str = VCS_MARKER) -> None:
        self._root = os.path.normpath(root) if root else None
        self._marker = marker

    @property
    def root(self) -> str | None:
        return self._root

    def is_repository_root(self, path: str) -> bool:
        """Return *True* iff *path* is a directory with the marker directly inside it."""
        return os.path.isdir(path) and os.path.isdir(os.path.join(path, self._marker))

    def decompose(self, path: str) -> tuple[str, str, str]:
        """Return ``(source, owner, repo)`` from the last three path segments.

        ``/ws/src/github.com/alice/proj1`` → ``("github.com", "alice", "proj1")``.
        Segment contents are taken verbatim.

        Raises
        ------
        MalformedPathError
            If fewer than three segments are available.
        """
        segments = self._segments(path)
        if len(segments) < 3:
            raise MalformedPathError(path, len(segments))
        source, owner, repo = segments[-3:]
        return source, owner, repo

    def _segments(self, path: str) -> list[str]:
        if self._root is None:
            return _split(path)
        relative = os.path.relpath(os.path.normpath(path), self._root)
        if relative == os.pardir or relative.startswith(os.pardir + os.sep):
            # Outside the workspace root: fall back to the absolute segments.
            return _split(path)
        return _split(relative)
