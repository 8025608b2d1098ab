"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    chordview_env: str = "development"
    chordview_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering defaults
    default_width: float = 900.0
    default_height: float = 600.0
    pad_angle: float = 0.05
    default_device_pixel_ratio: float = 2.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
