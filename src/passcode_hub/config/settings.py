"""
Configuration management for PasscodeHub.

This module provides environment-based configuration using Pydantic
BaseSettings. Store layout settings use the ``PASSCODE_`` prefix; the
connection string and log level are read without a prefix.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passcode_hub.domain.passcode.models import StoreConfig
from passcode_hub.infrastructure.sql.core.types import Dialect

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("PASSCODE_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the PASSCODE_ prefix, so
    PASSCODE_TABLE_NAME overrides ``table_name``. DATABASE_URL and
    LOG_LEVEL are read as-is.
    """

    DATABASE_URL: Optional[str] = Field(
        default=None,
        validation_alias="DATABASE_URL",
        description="SQLAlchemy database URL used by the CLI",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )

    table_name: str = Field(default="passcode", description="Passcode table")
    id_column: str = Field(default="id", description="Subject identifier column")
    code_column: str = Field(default="passcode", description="Passcode column")
    expiry_column: str = Field(default="expiredat", description="Expiry column")
    dialect: Optional[Dialect] = Field(
        default=None,
        description="Explicit dialect tag; resolved from the driver when unset",
    )

    model_config = SettingsConfigDict(
        env_prefix="PASSCODE_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("dialect", mode="before")
    @classmethod
    def _parse_dialect(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().lower() or None
        return value

    @field_validator("dialect")
    @classmethod
    def _reject_unsupported(cls, value: Optional[Dialect]) -> Optional[Dialect]:
        if value == Dialect.UNSUPPORTED:
            raise ValueError("PASSCODE_DIALECT cannot be 'unsupported'")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    def store_config(self) -> StoreConfig:
        """Build the store layout from the configured names."""
        return StoreConfig(
            table_name=self.table_name,
            id_column=self.id_column,
            code_column=self.code_column,
            expiry_column=self.expiry_column,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    The cache keeps one Settings object for the process; tests call
    ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
