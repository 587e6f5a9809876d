"""Performance monitoring for the agent runtime."""

from .metrics import OptimizationStrategy, PerformanceMetrics
from .monitor import PerformanceMonitor, current_memory_usage
from .optimizer import PerformanceOptimizer

__all__ = [
    "PerformanceMetrics",
    "OptimizationStrategy",
    "PerformanceMonitor",
    "PerformanceOptimizer",
    "current_memory_usage",
]
