"""Application configuration — loaded from environment variables."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gpm.domain.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file).

    Everything is read with the ``GPM_`` prefix except ``GOPATH``, which
    keeps its usual name.
    """

    model_config = SettingsConfigDict(
        env_prefix="GPM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gopath: str | None = Field(default=None, validation_alias=AliasChoices("GOPATH", "gopath"))
    workspace_root: str | None = None
    max_repos: int | None = Field(default=None, ge=1)
    log_level: str = "WARNING"
    host: str = "127.0.0.1"
    port: int = 8000

    def resolve_root(self) -> str:
        """Return the workspace root: explicit setting first, then ``$GOPATH/src``."""
        if self.workspace_root and self.workspace_root.strip():
            return self.workspace_root
        if self.gopath and self.gopath.strip():
            return os.path.join(self.gopath, "src")
        raise ConfigurationError(
            "No workspace root configured: set GPM_WORKSPACE_ROOT or GOPATH."
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
