"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "info"

    # Intensity used when a canvas is created without an explicit max value,
    # and for the "on" level when promoting monochrome to grayscale.
    default_max_value: int = 255

    # Netpbm recommends ASCII raster lines no longer than 70 characters
    ascii_line_width: int = 70

    model_config = SettingsConfigDict(
        env_prefix="RASTERKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
