"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("GMD_ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    log_level: str = "INFO"
    empty_cell: str = "~"
    strict_separators: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="GMD_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
