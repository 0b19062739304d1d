"""Configuration management for choretick."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # SQLite Configuration
    sqlite_db_path: str = Field(default="./data/chores.db", description="Path to the SQLite database file")

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")

    # Service identity
    service_name: str = Field(default="choretick", description="Service name reported to Logfire")
    service_version: str = Field(default="0.1.0", description="Service version reported to Logfire")
    environment: str = Field(default="production", description="Deployment environment name")


# Application Constants
class Constants:
    """Application-wide constants."""

    # Time arithmetic
    SECONDS_PER_HOUR: int = 3600
    SECONDS_PER_DAY: int = 86400

    # A one-hour frequency doubles as the "forced overdue" marker for unscheduled chores
    FORCED_OVERDUE_FREQUENCY: int = 1

    # HTTP Status Codes
    HTTP_OK: int = 200
    HTTP_CREATED: int = 201
    HTTP_NOT_FOUND: int = 404
    HTTP_CONFLICT: int = 409
    HTTP_SERVER_ERROR: int = 500
    HTTP_SERVICE_UNAVAILABLE: int = 503

    # Pagination Defaults
    DEFAULT_PER_PAGE_LIMIT: int = 1000  # Upper bound for a single chore list query


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
