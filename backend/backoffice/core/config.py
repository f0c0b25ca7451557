"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Property Back Office"
    debug: bool = False
    api_v1_prefix: str = "/v1"
    log_level: str = "INFO"

    # Database
    database_url: str

    # Firebase Auth
    firebase_project_id: Optional[str] = None
    google_application_credentials: Optional[str] = None

    # CORS
    allowed_origins: str = "http://localhost:5173"

    # Index pages
    default_per_page: int = 15


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
