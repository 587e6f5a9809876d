"""Fallback executor for critical operations."""

from typing import TypeVar

import structlog

from agent_runtime.observability.logging import ensure_correlation_id

from ..utils import invoke
from .chain import FallbackChain

logger = structlog.get_logger()

T = TypeVar("T")


class FallbackExecutor:
    """Runs a primary producer and degrades through its fallbacks."""

    def __init__(self, attempt_timeout: float | None = None):
        """Initialize fallback executor.

        Args:
            attempt_timeout: Deadline in seconds for each async producer
        """
        self.attempt_timeout = attempt_timeout

    async def execute_with_fallback(
        self, chain: FallbackChain[T], operation: str = "operation"
    ) -> T:
        """Execute ``chain`` and return the first value produced.

        Args:
            chain: Primary producer, ordered fallbacks and optional final value
            operation: Name used in logs

        Returns:
            Result of the first producer that succeeds

        Raises:
            Exception: Error of the last attempted producer when the chain is
                exhausted and has no final fallback
        """
        with ensure_correlation_id():
            return await self._run_chain(chain, operation)

    async def _run_chain(self, chain: FallbackChain[T], operation: str) -> T:
        try:
            return await invoke(chain.primary, self.attempt_timeout, operation)  # type: ignore[no-any-return]
        except Exception as primary_error:
            logger.warning(
                "Primary operation failed",
                operation=operation,
                error_type=type(primary_error).__name__,
                error_message=str(primary_error),
            )
            last_error: Exception = primary_error

        total = len(chain.fallbacks)
        for index, fallback in enumerate(chain.fallbacks, start=1):
            try:
                logger.info(
                    "Trying fallback", operation=operation, fallback=index, total=total
                )
                return await invoke(fallback, self.attempt_timeout, operation)  # type: ignore[no-any-return]
            except Exception as fallback_error:
                logger.warning(
                    "Fallback failed",
                    operation=operation,
                    fallback=index,
                    error_type=type(fallback_error).__name__,
                    error_message=str(fallback_error),
                )
                last_error = fallback_error

        if chain.final_fallback is not None:
            logger.info("Using final fallback (degraded mode)", operation=operation)
            return chain.final_fallback()

        logger.error("All fallbacks exhausted", operation=operation, fallbacks=total)
        raise last_error
