"""Application configuration and environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ``BOOK_REGISTRY_*`` environment variables."""

    app_name: str = "Book Registry"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BOOK_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
