"""Retry decorators for async callables."""

import functools
from collections.abc import Callable
from typing import Any

from .handler import RetryHandler


def with_retry(
    handler: RetryHandler, label: str | None = None
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate an async function so every call goes through ``handler``.

    Args:
        handler: Retry handler to use
        label: Operation name (defaults to the function name)

    Returns:
        Decorator function
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        operation_label = label or func.__name__

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            return await handler.retry(
                lambda: func(*args, **kwargs), operation_label
            )

        return wrapper

    return decorator
