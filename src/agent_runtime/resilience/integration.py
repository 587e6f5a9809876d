"""Facades wiring the resilience components for one runtime instance.

No module-level singletons: build a facade per runtime (or per test) and pass
it to the services that need it.
"""

import structlog

from .cache import CacheManager, Memoizer
from .degradation import GracefulDegradation
from .fallback import FallbackExecutor
from .performance import PerformanceMonitor, PerformanceOptimizer
from .recovery import ErrorRecoveryManager, default_strategies
from .retry import RetryHandler
from .settings import ResilienceSettings

logger = structlog.get_logger()


class ErrorHandler:
    """Retry, fallback, recovery and degradation for one runtime."""

    def __init__(
        self,
        retry: RetryHandler | None = None,
        fallback: FallbackExecutor | None = None,
        recovery: ErrorRecoveryManager | None = None,
        degradation: GracefulDegradation | None = None,
    ):
        self.retry = retry if retry is not None else RetryHandler()
        self.fallback = fallback if fallback is not None else FallbackExecutor()
        self.recovery = recovery if recovery is not None else ErrorRecoveryManager()
        self.degradation = (
            degradation if degradation is not None else GracefulDegradation()
        )

    def cleanup(self) -> None:
        """Drop recovery strategies and feature overrides."""
        self.recovery.clear_strategies()
        self.degradation.reset()


def create_error_handler(settings: ResilienceSettings | None = None) -> ErrorHandler:
    """Build an ``ErrorHandler`` with the default recovery strategies."""
    settings = settings or ResilienceSettings()
    recovery = ErrorRecoveryManager()
    for strategy in default_strategies(settings.network_recovery_wait):
        recovery.register_strategy(strategy)

    handler = ErrorHandler(
        retry=RetryHandler(settings.get_retry_config()),
        fallback=FallbackExecutor(attempt_timeout=settings.attempt_timeout),
        recovery=recovery,
    )
    logger.info(
        "Error handler created",
        max_attempts=settings.retry_max_attempts,
        strategies=len(recovery.strategies),
    )
    return handler


def create_performance_optimizer(
    settings: ResilienceSettings | None = None,
) -> PerformanceOptimizer:
    """Build a ``PerformanceOptimizer`` from settings."""
    settings = settings or ResilienceSettings()
    return PerformanceOptimizer(
        cache=CacheManager(settings.get_cache_config()),
        memoizer=Memoizer(),
        monitor=PerformanceMonitor(settings.monitor_max_samples),
    )
