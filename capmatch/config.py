"""Configuration settings for the Capital Match API."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from capmatch import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CAPMATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Capital Match API"
    version: str = __version__

    # Matching
    top_matches: int = 3
    good_match_threshold: int = 50  # scores strictly above count as good matches

    # Reference data
    investors_file: Optional[Path] = None  # JSON list overriding the built-in investors

    # HTTP
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"


settings = Settings()
