"""structlog setup for the agent runtime."""

import logging
import sys
from enum import Enum
from typing import Any

import structlog
from structlog.stdlib import LoggerFactory

from .correlation import add_correlation_id


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging formats."""

    JSON = "json"
    CONSOLE = "console"


def _build_processors(
    format_type: LogFormat, enable_correlation: bool, include_timestamps: bool
) -> list[Any]:
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if enable_correlation:
        processors.append(add_correlation_id)
    if include_timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if format_type == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def setup_logging(
    level: LogLevel | str = LogLevel.INFO,
    format_type: LogFormat | str = LogFormat.JSON,
    log_file: str | None = None,
    enable_correlation: bool = True,
    include_timestamps: bool = True,
) -> None:
    """Route structlog through the standard library root logger.

    Args:
        level: Minimum level; accepts a ``LogLevel`` or its name
        format_type: ``json`` for one object per line, ``console`` for humans
        log_file: Write to this file instead of stdout
        enable_correlation: Add the active correlation ID to each event
        include_timestamps: Add an ISO-8601 UTC ``timestamp`` field
    """
    level = LogLevel(level.upper() if isinstance(level, str) else level)
    format_type = LogFormat(format_type)

    handler: logging.Handler = (
        logging.FileHandler(log_file) if log_file else logging.StreamHandler(sys.stdout)
    )
    # force=True replaces handlers left by an earlier call
    logging.basicConfig(
        level=getattr(logging, level.value),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=_build_processors(format_type, enable_correlation, include_timestamps),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
