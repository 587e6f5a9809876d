"""Error recovery manager."""

import inspect

import structlog

from .strategy import ErrorContext, RecoveryStrategy

logger = structlog.get_logger()


class ErrorRecoveryManager:
    """Dispatches failures to the first matching recovery strategy.

    Strategies are consulted in registration order. Recovery is advisory:
    ``recover`` reports whether a remedy ran but never raises, and it does
    not suppress or re-raise the original error on the caller's behalf.
    """

    def __init__(self) -> None:
        self._strategies: list[RecoveryStrategy] = []

    @property
    def strategies(self) -> tuple[RecoveryStrategy, ...]:
        """Registered strategies in dispatch order."""
        return tuple(self._strategies)

    def register_strategy(self, strategy: RecoveryStrategy) -> None:
        """Register recovery strategy."""
        self._strategies.append(strategy)
        logger.info("Registered recovery strategy", strategy=strategy.name)

    async def recover(self, context: ErrorContext) -> bool:
        """Apply the first strategy whose condition matches ``context.error``.

        Returns:
            True if a strategy action ran to completion
        """
        strategy = self._find_strategy(context.error)
        if strategy is None:
            logger.warning(
                "No recovery strategy found for error",
                operation=context.operation,
                correlation_id=context.correlation_id,
                error_message=str(context.error),
            )
            return False

        logger.info(
            "Applying recovery strategy",
            strategy=strategy.name,
            operation=context.operation,
            attempt=context.attempt,
            correlation_id=context.correlation_id,
        )
        try:
            result = strategy.action(context)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(
                "Recovery strategy failed",
                strategy=strategy.name,
                operation=context.operation,
                correlation_id=context.correlation_id,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False
        return True

    def clear_strategies(self) -> None:
        """Clear all strategies."""
        self._strategies.clear()

    def _find_strategy(self, error: BaseException) -> RecoveryStrategy | None:
        for strategy in self._strategies:
            try:
                if strategy.condition(error):
                    return strategy
            except Exception as e:
                logger.warning(
                    "Recovery condition raised, skipping strategy",
                    strategy=strategy.name,
                    error_message=str(e),
                )
        return None
