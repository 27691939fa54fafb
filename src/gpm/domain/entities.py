"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WalkAction(str, Enum):
    """Instruction returned for each visited directory during a walk."""

    DESCEND = "descend"
    SKIP_SUBTREE = "skip_subtree"
    STOP = "stop"


@dataclass(frozen=True, slots=True)
class Source:
    """A hosting root such as ``github.com``."""

    name: str


@dataclass(frozen=True, slots=True)
class Owner:
    """An organisation / user namespace, scoped to a single source."""

    name: str
    source_name: str


@dataclass(frozen=True, slots=True)
class Repository:
    """A single discovered version-controlled project."""

    name: str
    owner: str
    source: str
    path: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.source}/{self.owner}/{self.name}"
