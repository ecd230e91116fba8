"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    rxart_env: str = "development"
    rxart_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Artwork defaults
    default_canvas_size: float = 200.0
    default_confidence: float = 0.85

    # Memoised renders kept in memory
    cache_size: int = 256

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
