"""Memoization helper for deterministic functions."""

import asyncio
import functools
import inspect
import json
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

logger = structlog.get_logger()

F = TypeVar("F", bound=Callable[..., Any])


def default_key(*args: Any, **kwargs: Any) -> str:
    """Structural key for an argument list.

    Arguments that are not JSON-serializable fall back to ``repr``, which for
    most objects includes their identity; pass a ``key_fn`` to ``memoize``
    when such arguments should share cached results. Argument lists that JSON
    cannot encode at all (mixed-type dict keys, cycles) are keyed by ``repr``.
    """
    try:
        return json.dumps([args, kwargs], sort_keys=True, default=repr)
    except (TypeError, ValueError):
        return repr((args, sorted(kwargs.items())))


class Memoizer:
    """Caches results of memoized functions in one shared, unbounded store.

    ``clear`` invalidates every function memoized by this instance; use
    separate instances when functions need independent lifetimes.
    """

    def __init__(self) -> None:
        self._cache: dict[tuple[str, str], Any] = {}

    def memoize(self, fn: F, key_fn: Callable[..., str] | None = None) -> F:
        """Wrap ``fn`` so repeated calls with equal keys reuse the first result.

        Args:
            fn: Deterministic function or coroutine function
            key_fn: Builds the cache key from the call arguments

        Returns:
            Wrapper with the same signature as ``fn``
        """
        make_key = key_fn or default_key
        namespace = f"{fn.__module__}.{fn.__qualname__}:{id(fn)}"

        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                key = (namespace, make_key(*args, **kwargs))
                task = self._cache.get(key)
                if task is None:
                    task = asyncio.ensure_future(fn(*args, **kwargs))
                    self._cache[key] = task
                try:
                    # Concurrent callers share one task; one caller being
                    # cancelled must not cancel it for the others.
                    return await asyncio.shield(task)
                except Exception:
                    if self._cache.get(key) is task:
                        del self._cache[key]
                    raise

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            key = (namespace, make_key(*args, **kwargs))
            if key in self._cache:
                return self._cache[key]
            result = fn(*args, **kwargs)
            self._cache[key] = result
            return result

        return wrapper  # type: ignore[return-value]

    @property
    def size(self) -> int:
        """Number of cached results across all memoized functions."""
        return len(self._cache)

    def clear(self) -> None:
        """Clear memoization cache."""
        cleared = len(self._cache)
        self._cache.clear()
        logger.debug("Memoization cache cleared", entries=cleared)
