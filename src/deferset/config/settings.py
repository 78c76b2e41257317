"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from deferset.config import ManagerSettings, LoggingSettings

    # Load from environment variables (DEFERSET_*, DEFERSET_LOG_*)
    manager_settings = ManagerSettings()
    logging_settings = LoggingSettings()

    # Or override with explicit values
    manager_settings = ManagerSettings(id_attribute="uuid")
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class ManagerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for entity managers.

    Attributes:
        id_attribute: Field name used as the record identifier.

    Environment Variables:
        DEFERSET_ID_ATTRIBUTE
    """

    model_config = SettingsConfigDict(
        env_prefix="DEFERSET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    id_attribute: str = "id"


class LoggingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for structured logging.

    Attributes:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        format: Output renderer, human readable console or one JSON object per line.

    Environment Variables:
        DEFERSET_LOG_LEVEL
        DEFERSET_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="DEFERSET_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
