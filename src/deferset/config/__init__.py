"""Configuration module using Pydantic Settings.

Provides typed configuration for managers and logging with environment
variable support.

Usage:
    from deferset.config import ManagerSettings, configure_logging

    settings = ManagerSettings(id_attribute="uuid")
    configure_logging()
"""

from deferset.config.logging import configure_logging, is_configured
from deferset.config.settings import LoggingSettings, ManagerSettings

__all__ = [
    "ManagerSettings",
    "LoggingSettings",
    "configure_logging",
    "is_configured",
]
