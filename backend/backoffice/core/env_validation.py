"""
Runtime Environment Validation Module

This module validates all required environment variables at application startup.
If validation fails, the application will refuse to start (hard fail).
"""

import os
import sys
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_DATABASE_SCHEMES = ("postgresql", "sqlite")


class ProductionSettings(BaseSettings):
    """
    Strict validation schema for production environment variables.

    All required fields MUST be present and valid, or the application will not start.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================================================
    # CRITICAL: Database Configuration
    # ========================================================================
    database_url: str  # REQUIRED: postgresql+asyncpg:// (sqlite+aiosqlite:// in debug)

    # ========================================================================
    # Firebase Authentication
    # ========================================================================
    firebase_project_id: Optional[str] = None
    google_application_credentials: Optional[str] = None  # Path to service account JSON

    # ========================================================================
    # Application Configuration
    # ========================================================================
    app_name: str = "Property Back Office"
    debug: bool = False
    api_v1_prefix: str = "/v1"
    log_level: str = "INFO"

    # ========================================================================
    # CRITICAL: CORS Configuration
    # ========================================================================
    allowed_origins: str  # REQUIRED: Comma-separated list of allowed origins


def validate_environment() -> ProductionSettings:
    """
    Validate all required environment variables at startup.

    Returns:
        ProductionSettings: Validated settings object

    Raises:
        SystemExit: If validation fails (exit code 1)
    """

    try:
        settings = ProductionSettings()
    except ValidationError as e:
        print("FATAL: Environment validation failed", file=sys.stderr)
        print("\nMissing or invalid environment variables:", file=sys.stderr)
        for error in e.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            print(f"   - {field}: {error['msg']}", file=sys.stderr)
        print("\nPlease check your .env file or environment variables.", file=sys.stderr)
        sys.exit(1)

    # 1. CORS: Ensure wildcard is not used in production
    if not settings.debug:
        origins = [o.strip() for o in settings.allowed_origins.split(",")]
        if "*" in origins:
            print(
                "FATAL: Wildcard CORS origin (*) detected in production mode.",
                file=sys.stderr,
            )
            sys.exit(1)

    # 2. Database URL: Basic format validation
    if not settings.database_url.startswith(SUPPORTED_DATABASE_SCHEMES):
        print(
            "FATAL: DATABASE_URL must be a PostgreSQL or SQLite connection string",
            file=sys.stderr,
        )
        sys.exit(1)
    if settings.database_url.startswith("sqlite") and not settings.debug:
        print("FATAL: SQLite is only allowed when DEBUG=true", file=sys.stderr)
        sys.exit(1)

    # 3. Firebase: Validate credentials path exists (if provided)
    if settings.google_application_credentials:
        if not os.path.exists(settings.google_application_credentials):
            print(
                f"FATAL: Firebase credentials file not found: {settings.google_application_credentials}",
                file=sys.stderr,
            )
            sys.exit(1)

    print("Environment validation passed")
    print(f"   App: {settings.app_name}")
    print(f"   Debug: {settings.debug}")
    print(f"   CORS Origins: {settings.allowed_origins}")

    return settings


if __name__ == "__main__":
    validate_environment()
    print("\nAll environment variables are valid!")
