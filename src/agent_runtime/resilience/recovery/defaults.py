"""Built-in recovery strategies for common runtime failures."""

import asyncio
import gc
from collections.abc import Callable

import structlog

from .strategy import ErrorContext, RecoveryStrategy

logger = structlog.get_logger()

DEFAULT_TIMEOUT_MS = 5000


def _message_contains(fragment: str) -> Callable[[BaseException], bool]:
    def condition(error: BaseException) -> bool:
        return fragment in str(error).lower()

    return condition


def network_recovery(wait_seconds: float = 5.0) -> RecoveryStrategy:
    """Pause so a flaky connection can come back before the next attempt."""

    async def action(context: ErrorContext) -> None:
        logger.info(
            "Waiting for network to recover",
            operation=context.operation,
            wait_seconds=wait_seconds,
        )
        await asyncio.sleep(wait_seconds)

    return RecoveryStrategy(
        name="Network Error Recovery",
        condition=_message_contains("network"),
        action=action,
    )


def memory_recovery() -> RecoveryStrategy:
    """Force a garbage collection pass."""

    def action(context: ErrorContext) -> None:
        collected = gc.collect()
        context.metadata["gc_collected"] = collected
        logger.info(
            "Freed memory", operation=context.operation, collected=collected
        )

    return RecoveryStrategy(
        name="Memory Error Recovery",
        condition=_message_contains("memory"),
        action=action,
    )


def timeout_recovery() -> RecoveryStrategy:
    """Double the timeout recorded in the context metadata (ms)."""

    def action(context: ErrorContext) -> None:
        timeout = context.metadata.get("timeout", DEFAULT_TIMEOUT_MS) * 2
        context.metadata["timeout"] = timeout
        logger.info(
            "Increasing timeout for next attempt",
            operation=context.operation,
            timeout=timeout,
        )

    return RecoveryStrategy(
        name="Timeout Error Recovery",
        condition=_message_contains("timeout"),
        action=action,
    )


def default_strategies(network_wait: float = 5.0) -> list[RecoveryStrategy]:
    """Network, memory and timeout strategies, in that priority order."""
    return [network_recovery(network_wait), memory_recovery(), timeout_recovery()]
