"""Structured logging configuration and correlation IDs."""

from .config import LogFormat, LogLevel, get_logger, setup_logging
from .correlation import (
    add_correlation_id,
    correlation_scope,
    ensure_correlation_id,
    get_correlation_id,
    new_correlation_id,
)

__all__ = [
    "setup_logging",
    "LogLevel",
    "LogFormat",
    "get_logger",
    "add_correlation_id",
    "correlation_scope",
    "ensure_correlation_id",
    "get_correlation_id",
    "new_correlation_id",
]
