"""Domain layer for the agent runtime."""

from .exceptions import AgentRuntimeException
from .models import ErrorCode

__all__ = ["AgentRuntimeException", "ErrorCode"]
