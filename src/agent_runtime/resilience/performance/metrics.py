"""Performance sample and recommendation types."""

from dataclasses import asdict, dataclass
from typing import Any

from agent_runtime.domain.models import ImpactLevel, OptimizationStatus

METRIC_FIELDS = ("bundle_size", "memory_usage", "response_time", "cache_hit_rate")


@dataclass
class PerformanceMetrics:
    """One performance sample, or an average over several."""

    bundle_size: float = 0.0  # bytes
    memory_usage: float = 0.0  # MB
    response_time: float = 0.0  # ms
    cache_hit_rate: float = 0.0  # 0-1
    timestamp: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class OptimizationStrategy:
    """A recommendation derived from averaged metrics."""

    name: str
    description: str
    impact: ImpactLevel
    effort: ImpactLevel
    status: OptimizationStatus = OptimizationStatus.PENDING

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "impact": self.impact.value,
            "effort": self.effort.value,
            "status": self.status.value,
        }
