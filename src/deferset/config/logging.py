"""Structured logging setup.

Library modules only call structlog.get_logger(). Applications opt in to
rendering by calling configure_logging() once at startup.

Usage:
    from deferset.config import LoggingSettings, configure_logging

    configure_logging()  # from DEFERSET_LOG_* environment variables
    configure_logging(LoggingSettings(level="DEBUG", format="json"), force=True)
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

from deferset.config.settings import LoggingSettings

_configured = False


def configure_logging(settings: LoggingSettings | None = None, *, force: bool = False) -> None:
    """Configure structlog on top of stdlib logging.

    Subsequent calls are no-ops unless force=True.

    Args:
        settings: Logging settings (loaded from environment if None).
        force: Reconfigure even if already configured.
    """
    global _configured

    if _configured and not force:
        return

    settings = settings or LoggingSettings()
    level = getattr(logging, settings.level)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)
    logging.getLogger("deferset").setLevel(level)

    _configured = True


def is_configured() -> bool:
    """Check if logging has been configured."""
    return _configured
