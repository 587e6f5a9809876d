"""Resilience-specific exceptions."""

from typing import Any

from agent_runtime.domain.exceptions import AgentRuntimeException
from agent_runtime.domain.models import ErrorCode
from agent_runtime.observability.logging import get_correlation_id


class ResilienceException(AgentRuntimeException):
    """Base exception for resilience patterns.

    Without an explicit ``correlation_id`` the ID bound to the raising
    context is recorded.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
        correlation_id: str | None = None,
    ):
        super().__init__(
            message, error_code, details, correlation_id or get_correlation_id()
        )


class RetryExhaustedException(ResilienceException):
    """Retry attempts exhausted exception.

    The last underlying error is chained as ``__cause__``.
    """

    def __init__(
        self,
        label: str,
        max_attempts: int,
        last_error: str,
        correlation_id: str | None = None,
    ):
        super().__init__(
            f"{label} failed after {max_attempts} attempts: {last_error}",
            ErrorCode.RETRY_EXHAUSTED,
            {
                "label": label,
                "max_attempts": max_attempts,
                "last_error": last_error,
            },
            correlation_id,
        )
        self.label = label
        self.max_attempts = max_attempts
        self.last_error = last_error


class AttemptTimeoutException(ResilienceException):
    """A single attempt exceeded its deadline."""

    def __init__(
        self,
        operation: str,
        timeout: float,
        correlation_id: str | None = None,
    ):
        super().__init__(
            f"{operation} timed out after {timeout}s",
            ErrorCode.TIMEOUT_ERROR,
            {"operation": operation, "timeout": timeout},
            correlation_id,
        )
        self.operation = operation
        self.timeout = timeout
