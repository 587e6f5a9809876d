"""Facade bundling the cache, memoizer and monitor."""

from typing import Any

import structlog

from ..cache import CacheConfig, CacheManager, Memoizer
from .monitor import PerformanceMonitor

logger = structlog.get_logger()


class PerformanceOptimizer:
    """Owns one cache, memoizer and monitor for a runtime instance."""

    def __init__(
        self,
        cache: CacheManager[Any] | None = None,
        memoizer: Memoizer | None = None,
        monitor: PerformanceMonitor | None = None,
        cache_config: CacheConfig | None = None,
    ):
        self.cache: CacheManager[Any] = (
            cache if cache is not None else CacheManager(cache_config)
        )
        self.memoizer = memoizer if memoizer is not None else Memoizer()
        self.monitor = monitor if monitor is not None else PerformanceMonitor()

    def run_audit(self) -> dict[str, Any]:
        """Snapshot of averaged metrics, recommendations and cache stats."""
        audit = {
            "metrics": self.monitor.get_average_metrics(),
            "recommendations": self.monitor.get_recommendations(),
            "cache_stats": self.cache.get_stats(),
        }
        logger.info(
            "Performance audit completed",
            recommendations=len(audit["recommendations"]),
            cache_size=audit["cache_stats"]["size"],
        )
        return audit

    def cleanup(self) -> None:
        """Clear cache, memoized results and samples."""
        self.cache.clear()
        self.memoizer.clear()
        self.monitor.clear()
