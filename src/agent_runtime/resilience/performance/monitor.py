"""Rolling performance monitor with threshold-based recommendations."""

import math
import time
from collections import deque
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

import psutil
import structlog

from agent_runtime.domain.models import ImpactLevel

from .metrics import METRIC_FIELDS, OptimizationStrategy, PerformanceMetrics

logger = structlog.get_logger()


class PerformanceMonitor:
    """Keeps the most recent performance samples and summarizes them.

    Samples are partial: any metric a producer does not report is recorded as
    zero and averaged as zero. Nothing here raises; with no samples the
    averages are all zero and there are no recommendations.
    """

    MEMORY_USAGE_THRESHOLD = 500.0  # MB
    RESPONSE_TIME_THRESHOLD = 1000.0  # ms
    CACHE_HIT_RATE_THRESHOLD = 0.5

    def __init__(
        self,
        max_samples: int = 100,
        *,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize performance monitor.

        Args:
            max_samples: Size of the rolling window
            clock: Wall-clock time source in seconds
        """
        self.max_samples = max(1, max_samples)
        self._clock = clock
        self._samples: deque[PerformanceMetrics] = deque(maxlen=self.max_samples)

    def record_metrics(
        self, metrics: Mapping[str, Any] | None = None, **fields: Any
    ) -> PerformanceMetrics:
        """Append one sample built from ``metrics`` and keyword fields."""
        values = {**(metrics or {}), **fields}
        sample = PerformanceMetrics(timestamp=self._clock())

        for name, value in values.items():
            if name not in METRIC_FIELDS:
                logger.warning("Ignoring unknown performance metric", metric=name)
                continue
            try:
                number = float(value)
            except (TypeError, ValueError):
                logger.warning(
                    "Ignoring non-numeric performance metric",
                    metric=name,
                    value=repr(value),
                )
                continue
            if math.isfinite(number):
                setattr(sample, name, number)

        self._samples.append(sample)
        return sample

    def get_average_metrics(self, window: float | None = None) -> PerformanceMetrics:
        """Average every metric over retained samples.

        Args:
            window: Only consider samples from the last ``window`` seconds

        Returns:
            Averaged metrics, all zero when no samples qualify
        """
        now = self._clock()
        samples = list(self._samples)
        if window is not None:
            cutoff = now - window
            samples = [s for s in samples if s.timestamp > cutoff]

        if not samples:
            return PerformanceMetrics(timestamp=now)

        count = len(samples)
        averages = {
            name: sum(getattr(s, name) for s in samples) / count
            for name in METRIC_FIELDS
        }
        return PerformanceMetrics(timestamp=now, **averages)

    def get_recommendations(self) -> list[OptimizationStrategy]:
        """Compare current averages against the static thresholds."""
        if not self._samples:
            return []

        averages = self.get_average_metrics()
        recommendations: list[OptimizationStrategy] = []

        if averages.memory_usage > self.MEMORY_USAGE_THRESHOLD:
            recommendations.append(
                OptimizationStrategy(
                    name="Reduce Memory Usage",
                    description=(
                        "Memory usage is high. Consider more aggressive "
                        "cache eviction."
                    ),
                    impact=ImpactLevel.HIGH,
                    effort=ImpactLevel.MEDIUM,
                )
            )

        if averages.response_time > self.RESPONSE_TIME_THRESHOLD:
            recommendations.append(
                OptimizationStrategy(
                    name="Optimize Response Time",
                    description=(
                        "Response time is slow. Consider adding more caching "
                        "and memoization."
                    ),
                    impact=ImpactLevel.HIGH,
                    effort=ImpactLevel.LOW,
                )
            )

        if averages.cache_hit_rate < self.CACHE_HIT_RATE_THRESHOLD:
            recommendations.append(
                OptimizationStrategy(
                    name="Improve Cache Hit Rate",
                    description=(
                        "Cache hit rate is low. Review cache TTL and "
                        "eviction strategy."
                    ),
                    impact=ImpactLevel.MEDIUM,
                    effort=ImpactLevel.LOW,
                )
            )

        return recommendations

    @contextmanager
    def measure(self, name: str = "operation") -> Iterator[None]:
        """Time the enclosed block and record it with current process memory."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.record_metrics(
                response_time=elapsed_ms, memory_usage=current_memory_usage()
            )
            logger.debug(
                "Measured operation", operation=name, response_time=elapsed_ms
            )

    @property
    def sample_count(self) -> int:
        """Number of retained samples."""
        return len(self._samples)

    def clear(self) -> None:
        """Clear all metrics."""
        self._samples.clear()


def current_memory_usage() -> float:
    """Resident memory of this process in MB, or 0 if unavailable."""
    try:
        return psutil.Process().memory_info().rss / (1024 * 1024)
    except psutil.Error as e:
        logger.warning("Could not read process memory", error=str(e))
        return 0.0
