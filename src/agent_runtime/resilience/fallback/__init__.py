"""Fallback chains for graceful degradation.

A chain tries a primary producer, then alternates in order, then an optional
static last-resort value.
"""

from .chain import FallbackChain
from .executor import FallbackExecutor

__all__ = ["FallbackChain", "FallbackExecutor"]
