"""Retry-with-backoff executor."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog
from tenacity import AsyncRetrying, RetryCallState, RetryError, stop_after_attempt

from agent_runtime.observability.logging import ensure_correlation_id

from ..exceptions import RetryExhaustedException
from ..utils import invoke
from .config import RetryConfig
from .strategies import (
    ExponentialBackoffStrategy,
    LinearBackoffStrategy,
    RetryStrategy,
)

logger = structlog.get_logger()

T = TypeVar("T")


class RetryHandler:
    """Re-runs a failing operation with increasing delays.

    The wrapped operation must be safe to repeat. After the last failed
    attempt a ``RetryExhaustedException`` is raised with the final error as
    its cause.
    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        strategy: RetryStrategy | None = None,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize retry handler.

        Args:
            config: Retry configuration
            strategy: Backoff strategy (chosen from the config when omitted)
            sleep: Coroutine used to wait between attempts, in seconds
        """
        self.config = config or RetryConfig()
        if strategy is None:
            strategy = (
                ExponentialBackoffStrategy()
                if self.config.exponential_backoff
                else LinearBackoffStrategy()
            )
        self.strategy = strategy
        self._sleep = sleep

    def calculate_delay(self, attempt_index: int) -> float:
        """Delay in milliseconds after the zero-based failed attempt."""
        return self.strategy.calculate_delay(attempt_index, self.config)

    async def retry(
        self, operation: Callable[[], Awaitable[T] | T], label: str = "operation"
    ) -> T:
        """Run ``operation`` until it succeeds or attempts run out.

        Args:
            operation: Zero-argument sync or async callable
            label: Name used in logs and in the exhaustion error

        Returns:
            Result of the first successful attempt

        Raises:
            RetryExhaustedException: Every attempt failed
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_attempts),
            wait=self._wait,
            sleep=self._sleep,
            before_sleep=self._before_sleep(label),
        )

        attempts = 0

        async def attempt() -> T:
            nonlocal attempts
            attempts += 1
            return await invoke(operation, self.config.attempt_timeout, label)  # type: ignore[no-any-return]

        # Every attempt of one call logs under the same correlation ID.
        with ensure_correlation_id():
            try:
                result = await retrying(attempt)
            except RetryError as e:
                last_error = e.last_attempt.exception()
                logger.error(
                    "Operation failed after all retries",
                    operation=label,
                    attempts=self.config.max_attempts,
                    error_type=type(last_error).__name__,
                    error_message=str(last_error),
                )
                raise RetryExhaustedException(
                    label, self.config.max_attempts, str(last_error)
                ) from last_error

            if attempts > 1:
                logger.info(
                    "Operation succeeded after retries",
                    operation=label,
                    attempts=attempts,
                )
        return result

    def _wait(self, retry_state: RetryCallState) -> float:
        return self.calculate_delay(retry_state.attempt_number - 1) / 1000.0

    def _before_sleep(self, label: str) -> Callable[[RetryCallState], None]:
        def log_retry(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
            logger.warning(
                "Operation failed, retrying",
                operation=label,
                attempt=retry_state.attempt_number,
                max_attempts=self.config.max_attempts,
                delay=delay,
                error_type=type(error).__name__,
                error_message=str(error),
            )

        return log_retry


def create_retry_handler(**overrides: Any) -> RetryHandler:
    """Build a handler from ``RetryConfig`` field overrides."""
    return RetryHandler(RetryConfig(**overrides))
