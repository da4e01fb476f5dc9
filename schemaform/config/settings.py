"""
Settings - Engine configuration using Pydantic Settings.

Loads from SCHEMAFORM_* environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings."""

    # Analysis
    max_depth: int = Field(default=64, ge=1)
    root_path: str = "$"

    # Logging
    log_level: str = "INFO"
    log_category: str = "analyze"  # attached to every engine log record

    model_config = SettingsConfigDict(
        env_prefix="SCHEMAFORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
