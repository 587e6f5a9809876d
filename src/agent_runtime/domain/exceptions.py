"""Exception hierarchy for the agent runtime."""

from typing import Any

from .models import ErrorCode


class AgentRuntimeException(Exception):
    """Base exception for the agent runtime."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: dict[str, Any] | None = None,
        correlation_id: str | None = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
        self.correlation_id = correlation_id
