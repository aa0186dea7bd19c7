"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str
    # Create the schema on startup (local runs only; migrations are external)
    create_tables: bool = False

    # Bearer token clients must send in the Authorization header
    api_token: str | None = None

    # Development mode - bypasses auth for local development
    dev_mode: bool = False

    # "production" hides exception details from 500 responses
    environment: str = "development"

    api_prefix: str = "/api"
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        """True when running with production error reporting."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
