"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from plan_engine.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.suggestion_proxy_url)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


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
    # Supabase (exercise catalog and edge function host)
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # AI Suggestion - Proxy Transport
    # -------------------------------------------------------------------------
    suggestion_proxy_url: Optional[str] = Field(
        default=None,
        description="URL of the trusted suggestion proxy; derived from supabase_url if unset",
    )
    proxy_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the proxy suggestion call",
    )

    # -------------------------------------------------------------------------
    # AI Suggestion - Direct Provider Transport
    # -------------------------------------------------------------------------
    gemini_api_key: Optional[str] = Field(
        default=None,
        description="Provider API key; enables the direct tier and the proxy endpoint",
    )
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/",
        description="OpenAI-compatible endpoint of the language model provider",
    )
    gemini_model: str = Field(
        default="gemini-2.5-flash",
        description="Model used for exercise ordering",
    )
    direct_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for the direct provider call",
    )

    # -------------------------------------------------------------------------
    # Plan Generation
    # -------------------------------------------------------------------------
    catalog_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for loading the exercise catalog",
    )
    rest_seconds: int = Field(
        default=30,
        gt=0,
        description="Rest inserted between consecutive exercises",
    )
    min_suggested_exercises: int = Field(
        default=3,
        ge=1,
        description="Minimum validated AI ids / exercise items for an AI tier to succeed",
    )
    suggestion_overshoot_seconds: int = Field(
        default=60,
        ge=0,
        description="How far an AI-ordered plan may exceed the target before truncation",
    )
    tier_max_attempts: int = Field(
        default=1,
        ge=1,
        description="Attempts per AI tier; transport errors are retried up to this count",
    )
    tier_retry_wait_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Base exponential backoff between attempts within one AI tier",
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

    @model_validator(mode="after")
    def derive_proxy_url(self) -> "Settings":
        """Point the proxy at the Supabase edge function when only Supabase is set."""
        if not self.suggestion_proxy_url and self.supabase_url:
            self.suggestion_proxy_url = (
                f"{self.supabase_url.rstrip('/')}/functions/v1/generate-workout"
            )
        return self

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
