"""
Calculator Hub configuration.

Values come from environment variables (prefixed ``CALCHUB_``) or from the
env file picked by ``APP_ENV``.
"""

import os
from functools import lru_cache
from pydantic_settings import BaseSettings


def get_env_file() -> str:
    """Pick the env file for the current deployment."""
    if os.getenv("APP_ENV", "development") == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Runtime settings for the calculator API."""

    app_name: str = "Calculator Hub"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP surface
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False

    class Config:
        env_prefix = "CALCHUB_"
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
