# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# The Settings class validates all values at startup, catching configuration
# errors early rather than at runtime.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models.identity import Identity


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Server Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_NAME: str = Field(
        default="Token Classifier API",
        description="Display name used in docs and the root endpoint"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------
    # Echoed unchanged in every classify response

    FULL_NAME: str = Field(
        default="john_doe",
        min_length=1,
        description="Full name in lowercase (used in user_id)"
    )

    BIRTH_DATE: str = Field(
        default="17091999",
        min_length=1,
        description="Birth date in ddmmyyyy format (used in user_id)"
    )

    EMAIL: str = Field(
        default="john@xyz.com",
        description="Email returned in responses"
    )

    ROLL_NUMBER: str = Field(
        default="ABCD123",
        description="Roll number returned in responses"
    )

    # -------------------------------------------------------------------------
    # Classifier Settings
    # -------------------------------------------------------------------------

    DEDUPLICATE_RESULTS: bool = Field(
        default=False,
        description="Keep only the first occurrence of each value in the output lists"
    )

    OPERATION_CODE: int = Field(
        default=1,
        description="Value returned by GET /classify"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # Load from .env file in project root
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat empty env vars as unset
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
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
    def identity(self) -> Identity:
        """Identity built from the FULL_NAME/BIRTH_DATE/EMAIL/ROLL_NUMBER settings."""
        return Identity(
            full_name=self.FULL_NAME,
            birth_date=self.BIRTH_DATE,
            email=self.EMAIL,
            roll_number=self.ROLL_NUMBER,
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

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

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
