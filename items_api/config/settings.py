"""
Application Settings

Centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables, an optional
TOML config file, and sensible defaults.

Configuration Categories:
=========================
- Application: Basic app info (name, version, environment)
- Server: Host and port settings
- Security: Admin API key
- Store: Item id policy and lock striping
- Monitoring: Periodic store statistics logging
- Build: Version metadata injected at build/deploy time
- CORS: Cross-origin resource sharing

Source Priority:
================
    init kwargs  >  environment  >  .env  >  items-api.toml  >  defaults

The TOML file is looked up in ~/.config/ and in the current working
directory; the working directory file wins when both exist.

Usage:
======
    from items_api.config.settings import settings

    api_key = settings.API_KEY
    is_prod = settings.is_production
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Tuple, Type

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from items_api.shared.utils.constants import CONFIG_FILE_NAME, DEFAULT_API_KEY


class Environment(str, Enum):
    """Runtime environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


def config_file_paths() -> List[Path]:
    """
    Candidate TOML config files, lowest priority first.

    Files that do not exist are skipped by the settings source.
    """
    return [
        Path.home() / ".config" / CONFIG_FILE_NAME,
        Path.cwd() / CONFIG_FILE_NAME,
    ]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Use .env file or items-api.toml for local development.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # APPLICATION
    # ═══════════════════════════════════════════════════════════════════════════════

    APP_NAME: str = "items-api"
    APP_VERSION: str = "0.12.0"
    APP_ENV: Environment = Field(
        default=Environment.LOCAL,
        validation_alias=AliasChoices("APP_ENV", "API_ENV"),
        description="Runtime environment (local, development, test, production)",
    )
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════════════════════════
    # SERVER
    # ═══════════════════════════════════════════════════════════════════════════════

    HOST: str = "127.0.0.1"
    PORT: int = Field(default=3000, ge=0, le=65535)

    # ═══════════════════════════════════════════════════════════════════════════════
    # SECURITY
    # ═══════════════════════════════════════════════════════════════════════════════

    API_KEY: str = Field(
        default=DEFAULT_API_KEY,
        description="Shared secret required in the api-key header for admin routes",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # STORE
    # ═══════════════════════════════════════════════════════════════════════════════

    ITEM_ID_START: int = Field(
        default=1000,
        ge=0,
        description="First id handed out when the client does not supply one",
    )
    STORE_SHARD_COUNT: int = Field(
        default=16,
        ge=1,
        description="Number of independently locked shards in the item store",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # MONITORING
    # ═══════════════════════════════════════════════════════════════════════════════

    PERIODIC_STORE_LOG_ENABLED: bool = False
    PERIODIC_STORE_LOG_INTERVAL: int = Field(
        default=60,
        ge=1,
        description="Seconds between store statistics log lines",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # BUILD METADATA
    # ═══════════════════════════════════════════════════════════════════════════════

    DEPLOY_TAG: str = "local"
    BUILD_TIME: str = "unknown"
    GIT_BRANCH: str = "unknown"
    GIT_COMMIT: str = "unknown"

    # ═══════════════════════════════════════════════════════════════════════════════
    # CORS
    # ═══════════════════════════════════════════════════════════════════════════════

    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # ═══════════════════════════════════════════════════════════════════════════════
    # VALIDATORS
    # ═══════════════════════════════════════════════════════════════════════════════

    @field_validator("APP_ENV", mode="before")
    @classmethod
    def parse_environment(cls, value: Any) -> Any:
        """Accept any casing; unknown values fall back to local."""
        if isinstance(value, Environment):
            return value
        try:
            return Environment(str(value).strip().lower())
        except ValueError:
            return Environment.LOCAL

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=config_file_paths()),
            file_secret_settings,
        )

    # ═══════════════════════════════════════════════════════════════════════════════
    # PROPERTIES
    # ═══════════════════════════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == Environment.PRODUCTION

    @property
    def is_local(self) -> bool:
        """Check if running locally (console logging, docs enabled)."""
        return self.APP_ENV == Environment.LOCAL

    @property
    def docs_enabled(self) -> bool:
        """API documentation is not served in production."""
        return not self.is_production


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


# Global settings instance for convenient import
settings = get_settings()
