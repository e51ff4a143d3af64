"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Quiet period before a debounced regroup (ms)
    debounce_ms: float = 600.0

    # Defaults for new canvas sessions
    default_threshold: float = 0.5
    default_idle_time: float = 1.5
    default_layer: int = 1

    model_config = SettingsConfigDict(
        env_prefix="INKGROUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
