"""
Core configuration module using Pydantic Settings.

This module defines all application settings loaded from environment variables.
All configuration must go through this Settings class - NO hardcoded values.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.domain.value_objects.rate_quote import QUOTE_FIELDS

MEMORY_DATABASE_URL = "memory://"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are loaded from .env file or environment variables.
    Settings are validated using Pydantic with type hints.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(default="Currency API")
    version: str = Field(default="0.1.0")
    description: str = Field(default="Currency catalog and conversion lookup")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    debug: bool = Field(default=False)

    # -------------------------------------------------------------------------
    # Server Configuration
    # -------------------------------------------------------------------------
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="sqlite+aiosqlite:///./currency.db",
        description=(
            "SQLAlchemy async URL (postgresql+asyncpg://..., sqlite+aiosqlite://...) "
            "or memory:// for the in-process store"
        ),
    )
    database_create_tables: bool = Field(
        default=True,
        description="Create missing tables on startup",
    )

    # Connection Pool Settings
    db_pool_size: int = Field(default=5, ge=1, le=50)
    db_max_overflow: int = Field(default=10, ge=0, le=100)
    db_pool_timeout: float = Field(default=30.0, gt=0)  # Seconds
    db_pool_recycle: int = Field(default=3600, ge=300)  # Seconds
    db_pool_pre_ping: bool = Field(default=True)

    # -------------------------------------------------------------------------
    # Rate Provider / Conversion
    # -------------------------------------------------------------------------
    rate_provider_base_url: str = Field(default="https://economia.awesomeapi.com.br")
    rate_provider_timeout_seconds: float = Field(default=5.0, gt=0)
    rate_quote_field: str = Field(
        default="bid",
        description="Quote price used as the conversion rate",
    )
    rate_pair_tag_format: str = Field(
        default="{from}-{to}",
        description="Template for provider pair tags",
    )
    conversion_strategy: Literal["local", "provider"] = Field(default="provider")

    @field_validator("rate_quote_field")
    @classmethod
    def validate_quote_field(cls, v: str) -> str:
        """Only price fields can act as a rate."""
        v = v.lower()
        if v not in QUOTE_FIELDS:
            raise ValueError(f"rate_quote_field must be one of {', '.join(QUOTE_FIELDS)}")
        return v

    @field_validator("rate_pair_tag_format")
    @classmethod
    def validate_pair_tag_format(cls, v: str) -> str:
        """Both sides of the pair must appear in the tag."""
        if "{from}" not in v or "{to}" not in v:
            raise ValueError("rate_pair_tag_format must contain {from} and {to}")
        return v

    # -------------------------------------------------------------------------
    # CORS Settings
    # -------------------------------------------------------------------------
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:8000",
        description="Comma-separated list of allowed CORS origins"
    )
    cors_allow_credentials: bool = Field(default=True)

    # -------------------------------------------------------------------------
    # Logging Configuration
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")
    log_file_enabled: bool = Field(default=False)
    log_file_path: str = Field(default="logs/app.log")
    log_file_max_bytes: int = Field(default=10485760)  # 10 MB
    log_file_backup_count: int = Field(default=5)

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def uses_memory_store(self) -> bool:
        """Check if the in-process store is configured instead of a database."""
        return self.database_url == MEMORY_DATABASE_URL

    @property
    def cors_origins_list(self) -> list[str]:
        """Get parsed CORS origins as list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance (overridable in FastAPI DI)."""
    return Settings()


# Singleton instance of settings
# Import this instance throughout the application
settings = get_settings()
