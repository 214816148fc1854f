"""Centralized runtime settings."""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    """Supported logging formats."""

    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """Global configuration loaded from env vars and optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="OPTIMISMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # None means the lexicon bundled with the package.
    lexicon_path: Path | None = None

    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON

    @property
    def uses_bundled_lexicon(self) -> bool:
        return self.lexicon_path is None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings singleton."""
    return Settings()
