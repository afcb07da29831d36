"""Page configuration via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="INDUSTRY_PAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Scroll offset (px) above which the sticky header and back-to-top activate
    sticky_threshold: int = 100

    # Inline replacement for feature images that fail to load
    feature_image_fallback: str = "/placeholder.svg?height=200&width=300"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"
