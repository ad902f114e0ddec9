"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. PENNYWISE_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - installed usage

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pennywise.domain.tracking.value_objects import ensure_supported_currency


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. PENNYWISE_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env
    """
    env_file_path = os.environ.get("PENNYWISE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables with the PENNYWISE_ prefix (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="PENNYWISE_",
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Pennywise"

    # Data (the JSON backup exported by the tracker)
    data_file: Path = Path("data/backup.json")
    base_currency: str = "USD"

    # Reports
    trend_months: int = Field(default=6, ge=1)
    top_transactions_limit: int = Field(default=5, ge=1)
    missing_category_policy: Literal["drop", "bucket"] = "drop"

    # Logging
    log_level: str = "INFO"

    @field_validator("base_currency", mode="before")
    @classmethod
    def _normalize_currency(cls, v: Any) -> str:
        return ensure_supported_currency(str(v).strip())

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> str:
        return str(v).strip().upper()


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
