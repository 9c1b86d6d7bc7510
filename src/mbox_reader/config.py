"""Configuration management for MBOX Reader.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mbox_reader.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the MBOX_READER_ prefix (e.g., MBOX_READER_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="MBOX_READER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Archive input
    archive_encoding: str = Field(
        default="utf-8",
        description="Text encoding used when reading archive files",
    )
    archive_errors: str = Field(
        default="replace",
        description="Codec error handler used when reading archive files",
    )

    # Conversation view
    preview_length: int = Field(
        default=100,
        ge=0,
        description="Number of characters of the latest body shown as conversation preview",
    )

    # Output
    json_indent: int = Field(
        default=2,
        description="Indentation used for JSON output",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON lines",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigurationError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
