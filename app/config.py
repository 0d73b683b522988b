# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.JWT_ISSUER)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # JWT Bearer Authentication
    # -------------------------------------------------------------------------
    # The signing key is required - app won't start without it

    JWT_SECRET_KEY: str = Field(
        ...,
        min_length=16,
        description="Symmetric key used to verify bearer token signatures"
    )

    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Signing algorithm accepted for bearer tokens"
    )

    JWT_ISSUER: str = Field(
        default="users-api",
        description="Expected 'iss' claim of bearer tokens"
    )

    JWT_AUDIENCE: str = Field(
        default="users-api-clients",
        description="Expected 'aud' claim of bearer tokens"
    )

    JWT_EXPIRES_MINUTES: int = Field(
        default=60,
        ge=1,
        description="Lifetime of development tokens minted by scripts/issue_token.py"
    )

    # -------------------------------------------------------------------------
    # User Store
    # -------------------------------------------------------------------------

    STORE_BACKEND: Literal["memory", "sql"] = Field(
        default="memory",
        description="Which user store to build at startup"
    )

    DATABASE_URL: str = Field(
        default="sqlite:///./users.db",
        description="SQLAlchemy URL used when STORE_BACKEND=sql"
    )

    SQL_ECHO: bool = Field(
        default=False,
        description="Echo SQL statements to the log"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=5000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
