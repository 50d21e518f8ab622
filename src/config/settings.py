"""
Centralized settings management using pydantic-settings.

All environment variables and configuration values are defined here.
Use get_settings() to access the singleton settings instance.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Optional environment variables:
        - ENVIRONMENT: Environment name (development, staging, production)
        - LOG_LEVEL: Minimum log level (default: INFO)
        - JSON_LOGS: Emit JSON logs instead of console output
        - CATALOG_PATH: Path to the design catalog JSON document
        - PAIR_SEED: Seed for the pair-drawing RNG (unset = random)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Emit JSON logs (production)")

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # ==========================================================================
    # Catalog
    # ==========================================================================
    catalog_path: Path = Field(
        default=Path("data/sample-designs.json"),
        description="Design catalog JSON document"
    )
    pair_seed: Optional[int] = Field(
        default=None,
        description="Seed for random pair drawing (None = nondeterministic)"
    )

    @field_validator("catalog_path", mode="before")
    @classmethod
    def parse_catalog_path(cls, v):
        if isinstance(v, str):
            return Path(v)
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure only one instance is created.
    Settings are loaded from environment variables and .env file.

    Returns:
        Settings: The application settings instance
    """
    env_file = Path(__file__).parent.parent.parent / ".env"
    return Settings(_env_file=env_file if env_file.exists() else None)


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache to allow different settings in tests.

    Args:
        **overrides: Setting values to override

    Returns:
        Settings: A new settings instance with overrides applied
    """
    test_defaults = {
        "environment": "testing",
        "debug": True,
    }
    test_defaults.update(overrides)

    return Settings(**test_defaults)
