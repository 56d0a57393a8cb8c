"""Application configuration settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    app_title: str = "URL Shortener"
    app_version: str = "0.1.0"
    app_description: str = "In-memory URL shortener with expiring links"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    public_base_url: Optional[str] = None

    # URL Shortener
    default_validity_minutes: int = 30
    short_code_length: int = 6
    min_custom_code_length: int = 4
    max_custom_code_length: int = 20
    max_generation_attempts: int = 100
    redirect_delay_ms: int = 1000


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
