"""Self-disabling feature flags."""

from .manager import GracefulDegradation

__all__ = ["GracefulDegradation"]
