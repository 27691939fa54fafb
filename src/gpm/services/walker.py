"""Workspace walker — depth-first discovery of repository roots.

The walk itself only knows how to traverse; what to do at each directory
is decided by :meth:`Walker.visit`, which returns a :class:`WalkAction`.
"""

from __future__ import annotations

import logging
import os

from gpm.domain.entities import Repository, WalkAction
from gpm.domain.exceptions import ConfigurationError, MalformedPathError
from gpm.domain.ports.repo_classifier import RepoClassifier
from gpm.services.catalog import Catalog
from gpm.services.path_classifier import PathClassifier

logger = logging.getLogger(__name__)


class Walker:
    """Populate a :class:`Catalog` from one workspace root.

    Parameters
    ----------
    catalog:
        Catalog to fill.  A fresh one is created when omitted.
    classifier:
        Repository classifier.  Defaults to a :class:`PathClassifier`
        anchored at the root passed to :meth:`walk`.
    max_repos:
        Stop the traversal once this many repositories were recorded by
        the current walk.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        classifier: RepoClassifier | None = None,
        max_repos: int | None = None,
    ) -> None:
        if max_repos is not None and max_repos < 1:
            raise ValueError(f"max_repos must be at least 1, got {max_repos}")
        self._catalog = catalog if catalog is not None else Catalog()
        self._classifier = classifier
        self._active: RepoClassifier | None = classifier
        self._max_repos = max_repos
        self._start = len(self._catalog)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    # ── Public entry point ──────────────────────────────────────────────

    def walk(self, root: str) -> Catalog:
        """Traverse *root* pre-order and return the populated catalog.

        Symlinked directories are classified where they appear but never
        descended into.
        """
        root = _validate_root(root)
        self._active = self._classifier or PathClassifier(root=root)
        self._start = len(self._catalog)

        logger.info("Scanning workspace %s", root)

        for dirpath, dirnames, _filenames in os.walk(root, onerror=_log_walk_error):
            action = self.visit(dirpath)
            if action is WalkAction.DESCEND:
                action = self._visit_links(dirpath, dirnames)
            if action is WalkAction.STOP:
                break
            if action is WalkAction.SKIP_SUBTREE:
                dirnames[:] = []

        logger.info("Found %d repositories under %s", self._found(), root)
        return self._catalog

    def _visit_links(self, dirpath: str, dirnames: list[str]) -> WalkAction:
        # os.walk lists linked directories without yielding them.
        for name in dirnames:
            link = os.path.join(dirpath, name)
            if os.path.islink(link) and self.visit(link) is WalkAction.STOP:
                return WalkAction.STOP
        return WalkAction.DESCEND

    # ── Per-directory decision ──────────────────────────────────────────

    def visit(self, path: str) -> WalkAction:
        """Classify *path*, record it if it is a repository, and say what to do next."""
        classifier = self._active or PathClassifier()

        if self._limit_reached():
            return WalkAction.STOP
        if not classifier.is_repository_root(path):
            return WalkAction.DESCEND

        try:
            source, owner, name = classifier.decompose(path)
        except MalformedPathError as exc:
            logger.warning("Skipping %s: %s", path, exc)
            return WalkAction.SKIP_SUBTREE

        self._catalog.add_repo(Repository(name=name, owner=owner, source=source, path=path))
        logger.debug("Repository %s/%s/%s at %s", source, owner, name, path)

        if self._limit_reached():
            return WalkAction.STOP
        return WalkAction.SKIP_SUBTREE

    def _found(self) -> int:
        return len(self._catalog) - self._start

    def _limit_reached(self) -> bool:
        return self._max_repos is not None and self._found() >= self._max_repos


def walk(root: str, max_repos: int | None = None) -> Catalog:
    """Scan *root* into a new :class:`Catalog`."""
    return Walker(max_repos=max_repos).walk(root)


def _validate_root(root: str) -> str:
    if not root or not root.strip():
        raise ConfigurationError("Workspace root is empty.")
    root = os.path.abspath(os.path.expanduser(root))
    if not os.path.exists(root):
        raise ConfigurationError(f"Workspace root '{root}' does not exist.")
    if not os.path.isdir(root):
        raise ConfigurationError(f"Workspace root '{root}' is not a directory.")
    try:
        with os.scandir(root):
            pass
    except OSError as exc:
        raise ConfigurationError(
            f"Workspace root '{root}' cannot be read: {exc.strerror or exc}"
        ) from exc
    return root


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Cannot read %s: %s", exc.filename, exc.strerror or exc)
