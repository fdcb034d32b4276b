"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173,"
    "http://localhost:5174,"
    "https://tastr-client.web.app,"
    "https://tastr-client.firebaseapp.com"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    access_key: str
    token_lifetime_days: int = 30
    cors_origins: str = DEFAULT_CORS_ORIGINS
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Return True when running the production deployment."""
        return self.environment == "production"


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse the comma-separated list of allowed CORS origins."""
    if raw is None:
        return []
    return [chunk.strip() for chunk in raw.split(",") if chunk.strip()]
