"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    identipattern_env: str = "development"
    identipattern_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Pattern defaults for the HTTP surface
    default_size: float = 120.0
    default_show_grid: bool = False
    max_size: float = 4096.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
