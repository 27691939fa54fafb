"""Shared fixtures: build real workspace trees under ``tmp_path``."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from gpm.infrastructure.config import get_settings


def _make_repo(root: Path, relative: str) -> Path:
    repo = root / relative
    (repo / ".git").mkdir(parents=True)
    return repo


@pytest.fixture
def make_repo() -> Callable[[Path, str], Path]:
    return _make_repo


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """``<tmp>/ws/src`` with alice/proj1 (holding a nested vendor repo) and bob/proj2."""
    root = tmp_path / "ws" / "src"
    _make_repo(root, "github.com/alice/proj1")
    _make_repo(root, "github.com/bob/proj2")
    _make_repo(root, "github.com/alice/proj1/vendor/lib")
    return root


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    for name in ("GOPATH", "GPM_WORKSPACE_ROOT", "GPM_MAX_REPOS", "GPM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
