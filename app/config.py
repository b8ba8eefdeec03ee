# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.SUPABASE_URL)
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
    # Supabase Configuration
    # -------------------------------------------------------------------------
    # These are required - app won't start without them

    SUPABASE_URL: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_ANON_KEY: str = Field(
        ...,
        description="Supabase anon/public API key (used for auth calls)"
    )

    SUPABASE_SERVICE_KEY: str = Field(
        ...,
        description="Supabase service_role key (bypasses RLS)"
    )

    SUPABASE_JWT_SECRET: str = Field(
        default="",
        description="Legacy HS256 JWT secret for verifying Supabase access tokens"
    )

    # -------------------------------------------------------------------------
    # Supabase Resources
    # -------------------------------------------------------------------------

    PROFILES_TABLE: str = Field(
        default="profiles",
        description="Table holding one profile row per user"
    )

    AVATAR_BUCKET: str = Field(
        default="avatars",
        description="Storage bucket for avatar images"
    )

    PROVISIONING_FUNCTION_NAME: str = Field(
        default="create-pinecone-index",
        description="Name of the remote function that provisions a user's index"
    )

    # -------------------------------------------------------------------------
    # Pinecone Configuration
    # -------------------------------------------------------------------------
    # Only the provisioning function needs the API key

    PINECONE_API_KEY: str = Field(
        default="",
        description="Pinecone API key for the control-plane API"
    )

    PINECONE_CONTROL_URL: str = Field(
        default="https://api.pinecone.io",
        description="Base URL of the Pinecone control plane"
    )

    PINECONE_DIMENSION: int = Field(
        default=1536,
        ge=1,
        description="Vector dimensionality of per-user indexes"
    )

    PINECONE_METRIC: Literal["cosine", "euclidean", "dotproduct"] = Field(
        default="cosine",
        description="Distance metric of per-user indexes"
    )

    PINECONE_CLOUD: str = Field(
        default="aws",
        description="Serverless cloud for per-user indexes"
    )

    PINECONE_REGION: str = Field(
        default="us-east-1",
        description="Serverless region for per-user indexes"
    )

    PINECONE_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout for control-plane requests"
    )

    # -------------------------------------------------------------------------
    # Redis Configuration (for Celery)
    # -------------------------------------------------------------------------

    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for Celery broker"
    )

    RECONCILE_BATCH_SIZE: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Max profiles the reconciliation task handles per run"
    )

    RECONCILE_INTERVAL_MINUTES: int = Field(
        default=0,
        ge=0,
        description="Run index reconciliation every N minutes via celery beat (0 = off)"
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
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    SITE_URL: str = Field(
        default="http://localhost:3000",
        description="Public site origin (used for email confirmation redirects)"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Avatar Upload Settings
    # -------------------------------------------------------------------------

    MAX_AVATAR_SIZE_MB: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum avatar upload size in MB"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Don't fail if .env doesn't exist (production sets env vars directly)
        env_ignore_empty=True,
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
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def max_avatar_size_bytes(self) -> int:
        """Convert MB to bytes for avatar size validation."""
        return self.MAX_AVATAR_SIZE_MB * 1024 * 1024

    @property
    def email_redirect_url(self) -> str:
        """Where Supabase sends users after they confirm their email."""
        return f"{self.SITE_URL.rstrip('/')}/"

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
