"""In-memory catalog of discovered sources, owners and repositories."""

from __future__ import annotations

from gpm.domain.entities import Owner, Repository, Source
from gpm.domain.exceptions import AmbiguousRepositoryError, RepositoryNotFoundError


class Catalog:
    """Deduplicated source / owner indexes plus an append-only repository list.

    Sources are keyed by name and owners by ``(name, source)``; both are
    insert-if-absent.  Repositories are kept in discovery order and are
    never deduplicated: two directories that decompose to the same triple
    are two entries.
    """

    def __init__(self) -> None:
        self._sources: dict[str, Source] = {}
        self._owners: dict[tuple[str, str], Owner] = {}
        self._repos: list[Repository] = []
        self._max_source_length = 0
        self._max_owner_length = 0

    # ── Writes ──────────────────────────────────────────────────────────

    def add_repo(self, repo: Repository) -> None:
        """Append *repo* and register its source and owner if unseen."""
        self._repos.append(repo)

        self._sources.setdefault(repo.source, Source(name=repo.source))
        self._owners.setdefault(
            (repo.owner, repo.source),
            Owner(name=repo.owner, source_name=repo.source),
        )

        self._max_source_length = max(self._max_source_length, len(repo.source))
        self._max_owner_length = max(self._max_owner_length, len(repo.owner))

    # ── Reads ───────────────────────────────────────────────────────────

    def sources(self) -> set[str]:
        """Return every distinct source name."""
        return set(self._sources)

    def owners(self, source: str | None = None) -> set[str]:
        """Return distinct owner names, optionally limited to one *source*.

        Owners sharing a name across sources collapse to a single string.
        """
        return {
            owner.name
            for owner in self._owners.values()
            if source is None or owner.source_name == source
        }

    def repositories(
        self,
        source: str | None = None,
        owner: str | None = None,
    ) -> tuple[Repository, ...]:
        """Return repositories in discovery order, optionally filtered."""
        return tuple(
            repo
            for repo in self._repos
            if (source is None or repo.source == source)
            and (owner is None or repo.owner == owner)
        )

    def find(self, name: str) -> list[Repository]:
        """Return repositories whose name (or ``owner/name`` / full name) is *name*."""
        return [
            repo
            for repo in self._repos
            if name in (repo.name, f"{repo.owner}/{repo.name}", repo.full_name)
        ]

    def resolve(self, name: str) -> Repository:
        """Return the single repository matching *name*."""
        matches = self.find(name)
        if not matches:
            raise RepositoryNotFoundError(f"No repository named '{name}' in the workspace.")
        if len(matches) > 1:
            candidates = ", ".join(repo.full_name for repo in matches)
            raise AmbiguousRepositoryError(
                f"'{name}' matches {len(matches)} repositories: {candidates}"
            )
        return matches[0]

    @property
    def max_source_length(self) -> int:
        return self._max_source_length

    @property
    def max_owner_length(self) -> int:
        return self._max_owner_length

    def __len__(self) -> int:
        return len(self._repos)
