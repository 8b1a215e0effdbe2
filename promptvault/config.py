# promptvault/config.py
"""
Centralized configuration with validation.

Uses pydantic-settings to load and validate environment variables (and an
optional .env file). The data directory is supplied by the host; the core
services never create it themselves.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Storage
    DATA_DIR: str = Field(
        default="./data",
        description="Application data directory holding the store file",
    )
    DATABASE_FILENAME: str = Field(
        default="prompts.db",
        description="Store file name inside DATA_DIR",
    )
    DATABASE_URL: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides DATA_DIR/DATABASE_FILENAME when set",
    )

    # Retention
    DEFAULT_VERSION_CLEANUP_THRESHOLD: int = Field(
        default=200,
        ge=1,
        description="Max versions kept per prompt when the stored setting is missing or invalid",
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit single-line JSON logs instead of human-readable lines",
    )

    # API
    CORS_ORIGINS: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins",
    )
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: development, production",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL '{v}'")
        return level

    @property
    def database_url(self) -> str:
        """Resolved SQLAlchemy URL for the store file."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"sqlite:///{Path(self.DATA_DIR) / self.DATABASE_FILENAME}"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings. Call at startup to validate config."""
    return Settings()


def ensure_data_dir(settings: Settings | None = None) -> Path:
    """Create the host data directory if needed. Called by entry points only."""
    settings = settings or get_settings()
    path = Path(settings.DATA_DIR)
    path.mkdir(parents=True, exist_ok=True)
    return path
