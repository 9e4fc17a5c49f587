"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    hilbertpath_env: str = "development"
    hilbertpath_log_level: str = "info"

    # Width of the index type accepted by the API
    hilbertpath_index_bits: int = 64

    # Largest page returned by POST /api/path
    hilbertpath_max_page_size: int = 4096

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
