"""Configuration management using Pydantic Settings.

This module provides type-safe configuration management with automatic
environment variable loading and validation using Pydantic Settings v2.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels and optional log file
- PlaylistConfig: Defaults applied by the command line front end
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "WARNING"
    file_level: str = "DEBUG"
    log_file: Path | None = None

    @field_validator("console_level", "file_level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class PlaylistConfig(BaseModel):
    """Defaults for building and displaying playlists."""

    default_order: str = "insertion"
    default_format: str = "table"

    @field_validator("default_order")
    @classmethod
    def validate_order(cls, value: str) -> str:
        order = value.lower()
        if order not in {"insertion", "name", "duration"}:
            raise ValueError(f"Unknown scanning order: {value}")
        return order

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in {"table", "json", "text"}:
            raise ValueError(f"Unknown output format: {value}")
        return fmt


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables use the SONGBOOK_ prefix and nested naming:
    - SONGBOOK_LOGGING__CONSOLE_LEVEL=DEBUG
    - SONGBOOK_PLAYLIST__DEFAULT_ORDER=duration

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_prefix="SONGBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    playlist: PlaylistConfig = PlaylistConfig()


# Singleton instance for application use
settings = Settings()


# Flat key mapping for callers that do not want the nested structure
_KEY_MAP = {
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "DEFAULT_ORDER": lambda: settings.playlist.default_order,
    "DEFAULT_FORMAT": lambda: settings.playlist.default_format,
}


def get_config(key: str, default: Any = None) -> Any:
    """Get configuration value by flat key with optional default.

    Example:
        >>> get_config("DEFAULT_ORDER", "insertion")
    """
    if key in _KEY_MAP:
        return _KEY_MAP[key]()
    return default
