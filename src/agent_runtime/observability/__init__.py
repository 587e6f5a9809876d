"""Observability helpers for the agent runtime."""

from .logging import correlation_scope, get_correlation_id, get_logger, setup_logging

__all__ = ["correlation_scope", "get_correlation_id", "get_logger", "setup_logging"]
