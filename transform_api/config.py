"""
Configuration management using Pydantic Settings.
Challenge: Centralized config, env validation, type safety.
Design: Single source of truth for all environment variables.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Transform API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Record enrichment: IANA zone used for Rfc_Created_On ("EST" in the tz database has no DST)
    timezone_name: str = "America/New_York"

    # Image conversion: bounding box edge in pixels
    image_bound: int = Field(256, gt=0)

    # Per-request deadline checked between pipeline steps; unset disables it
    request_timeout_seconds: Optional[float] = Field(None, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request (performance)."""
    return Settings()
