"""Fallback chain definition."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# Zero-argument callable returning a value or an awaitable of one
Producer = Callable[[], Any]


@dataclass
class FallbackChain(Generic[T]):
    """Ordered producers for one value.

    ``final_fallback`` is synchronous and must not raise; it is the
    guaranteed last resort once every other producer has failed.
    """

    primary: Producer
    fallbacks: list[Producer] = field(default_factory=list)
    final_fallback: Callable[[], T] | None = None
