"""Runtime configuration for StackScout."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``STACKSCOUT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="STACKSCOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Remote content
    raw_base_url: str = Field(default="https://raw.githubusercontent.com")
    fallback_branch: str = Field(default="master", min_length=1)
    github_token: str | None = Field(default=None)

    # Timeouts (seconds)
    request_timeout: float = Field(default=10.0, gt=0, le=300)
    analysis_timeout: float | None = Field(default=None, gt=0, le=600)


@lru_cache
def get_settings() -> Settings:
    """Cached singleton so the environment is read once per process."""
    return Settings()
