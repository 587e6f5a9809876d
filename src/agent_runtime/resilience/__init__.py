"""Resilience and performance toolkit for the agent runtime.

Seven independent components protect fallible operations (model inference,
sandboxed execution, network-bound tools) and track runtime performance:
bounded caching, memoization, performance monitoring, retry with backoff,
fallback chains, condition-dispatched recovery and self-disabling feature
flags. Callers compose them around their own operations.
"""

from .cache import CacheConfig, CacheManager, Memoizer
from .degradation import GracefulDegradation
from .exceptions import (
    AttemptTimeoutException,
    ResilienceException,
    RetryExhaustedException,
)
from .fallback import FallbackChain, FallbackExecutor
from .integration import ErrorHandler, create_error_handler, create_performance_optimizer
from .performance import (
    OptimizationStrategy,
    PerformanceMetrics,
    PerformanceMonitor,
    PerformanceOptimizer,
)
from .recovery import ErrorContext, ErrorRecoveryManager, RecoveryStrategy
from .retry import RetryConfig, RetryHandler, with_retry
from .settings import ResilienceSettings

__all__ = [
    "CacheConfig",
    "CacheManager",
    "Memoizer",
    "PerformanceMetrics",
    "OptimizationStrategy",
    "PerformanceMonitor",
    "PerformanceOptimizer",
    "RetryConfig",
    "RetryHandler",
    "with_retry",
    "FallbackChain",
    "FallbackExecutor",
    "ErrorContext",
    "RecoveryStrategy",
    "ErrorRecoveryManager",
    "GracefulDegradation",
    "ErrorHandler",
    "ResilienceSettings",
    "create_error_handler",
    "create_performance_optimizer",
    "ResilienceException",
    "RetryExhaustedException",
    "AttemptTimeoutException",
]
