"""Application configuration: environment-driven settings via pydantic-settings.

Every setting can be overridden with a ``KARFA_``-prefixed environment
variable or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KARFA_", env_file=".env", case_sensitive=False
    )

    # Observability
    log_level: str = "WARNING"
    log_format: str = "text"

    # Catalog
    seed_catalog: bool = True

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
