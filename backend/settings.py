"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.generation_model)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import DEFAULT_CANDIDATE_LIMIT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Supabase Database (exercise catalog)
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the Supabase key."""
        return self.supabase_service_role_key

    # -------------------------------------------------------------------------
    # AI Services - workout generation
    # -------------------------------------------------------------------------
    openai_api_key: Optional[str] = Field(
        default=None,
        description="API key for the generation endpoint",
    )
    generation_base_url: Optional[str] = Field(
        default=None,
        description="Base URL of an OpenAI-compatible endpoint (default: OpenAI)",
    )
    generation_model: str = Field(
        default="gpt-4o-mini",
        description="Model used for workout generation and form tips",
    )
    generation_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single generation request",
    )
    generation_max_attempts: int = Field(
        default=1,
        ge=1,
        le=5,
        description="Attempts per generation call (1 disables retries)",
    )
    candidate_limit: int = Field(
        default=DEFAULT_CANDIDATE_LIMIT,
        ge=1,
        le=1000,
        description="Maximum number of catalog exercises offered to the generator",
    )

    # -------------------------------------------------------------------------
    # ExerciseDB (catalog sync source)
    # -------------------------------------------------------------------------
    exercisedb_api_key: Optional[str] = Field(
        default=None,
        description="RapidAPI key for ExerciseDB",
    )
    exercisedb_base_url: str = Field(
        default="https://exercisedb.p.rapidapi.com",
        description="ExerciseDB base URL",
    )
    sync_batch_size: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Concurrent page requests per sync batch",
    )
    sync_page_size: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Exercises requested per ExerciseDB page",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    @property
    def generation_configured(self) -> bool:
        """Check if a generation credential is available."""
        return bool(self.openai_api_key)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
