"""Retry mechanisms for fallible operations.

This module provides retry with exponential or linear backoff using the
tenacity library.
"""

from .config import RetryConfig
from .decorators import with_retry
from .handler import RetryHandler, create_retry_handler
from .strategies import ExponentialBackoffStrategy, LinearBackoffStrategy, RetryStrategy

__all__ = [
    "RetryConfig",
    "RetryHandler",
    "RetryStrategy",
    "ExponentialBackoffStrategy",
    "LinearBackoffStrategy",
    "create_retry_handler",
    "with_retry",
]
