"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Identity provider / edge functions
    supabase_url: str = "http://localhost:54321"
    supabase_anon_key: str = ""
    request_timeout_seconds: float = 10.0  # Applied to every remote call

    # Registration rules
    max_guests: int = 2  # Inclusive upper bound on guest count

    # Front-end routes the controller navigates to
    login_path: str = "/"
    form_path: str = "/form"
    ticket_path: str = "/your-ticket"

    # OAuth sign-in
    oauth_provider: str = "google"
    oauth_redirect_url: str = "http://localhost:3000/form"
    session_cookie_name: str = "sb-access-token"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
