"""Backoff strategies for retried operations."""

import random
from abc import ABC, abstractmethod

from .config import RetryConfig


class RetryStrategy(ABC):
    """Abstract base class for retry strategies."""

    @abstractmethod
    def calculate_delay(self, attempt_index: int, config: RetryConfig) -> float:
        """Delay in milliseconds after the zero-based failed attempt."""

    @staticmethod
    def _finalize(delay: float, config: RetryConfig) -> float:
        if config.max_delay is not None:
            delay = min(delay, config.max_delay)
        if config.jitter:
            delay *= random.uniform(0.5, 1.0)
        return delay


class ExponentialBackoffStrategy(RetryStrategy):
    """``base_delay * 2 ** attempt_index``."""

    def calculate_delay(self, attempt_index: int, config: RetryConfig) -> float:
        return self._finalize(config.base_delay * (2**attempt_index), config)


class LinearBackoffStrategy(RetryStrategy):
    """``base_delay * (attempt_index + 1)``."""

    def calculate_delay(self, attempt_index: int, config: RetryConfig) -> float:
        return self._finalize(config.base_delay * (attempt_index + 1), config)
