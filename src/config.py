"""Application configuration — env vars, YAML files, defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings


def _repo_root() -> Path:
    """Find the repository root (directory containing pyproject.toml)."""
    current = Path(__file__).resolve().parent.parent
    if (current / "pyproject.toml").exists():
        return current
    return Path.cwd()


REPO_ROOT = _repo_root()


class DatabaseConfig(BaseSettings):
    sqlite_path: Path = REPO_ROOT / "data" / "greetings.db"

    model_config = {"env_prefix": "GREETER_DB_"}


class ServerConfig(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    model_config = {"env_prefix": "GREETER_SERVER_"}


class AppConfig(BaseSettings):
    """Top-level application configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    # Environment & Sentry
    environment: str = "development"
    sentry_dsn: str = ""

    model_config = {"env_prefix": "GREETER_"}

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> AppConfig:
        """Load config from YAML file; keys it omits fall back to env vars and defaults."""
        if path is None:
            path = REPO_ROOT / "config" / "app.yml"

        values: dict[str, Any] = {}
        if path.exists():
            with open(path) as f:
                values = yaml.safe_load(f) or {}

        return cls(**values)
