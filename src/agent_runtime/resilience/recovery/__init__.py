"""Condition-dispatched error recovery."""

from .defaults import (
    default_strategies,
    memory_recovery,
    network_recovery,
    timeout_recovery,
)
from .manager import ErrorRecoveryManager
from .strategy import ErrorContext, RecoveryStrategy

__all__ = [
    "ErrorContext",
    "ErrorRecoveryManager",
    "RecoveryStrategy",
    "default_strategies",
    "memory_recovery",
    "network_recovery",
    "timeout_recovery",
]
