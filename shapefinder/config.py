"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Analyzer defaults
    default_threshold: int = 130
    default_noise_reduction: int = 1
    default_outline_color: str = "#0000ff"

    # Reject uploads larger than this many pixels (after resize)
    max_image_pixels: int = 250_000

    model_config = SettingsConfigDict(
        env_prefix="shapefinder_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
