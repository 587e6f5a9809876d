"""Domain models for the agent runtime."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes carried by runtime exceptions."""

    INTERNAL_ERROR = "internal_error"
    EXTERNAL_SERVICE_ERROR = "external_service_error"
    RETRY_EXHAUSTED = "retry_exhausted"
    TIMEOUT_ERROR = "timeout_error"


class ImpactLevel(str, Enum):
    """Relative weight of an optimization recommendation."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class OptimizationStatus(str, Enum):
    """Lifecycle of an optimization recommendation."""

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
