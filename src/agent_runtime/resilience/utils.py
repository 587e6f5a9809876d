"""Helpers shared by the resilience components."""

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

from .exceptions import AttemptTimeoutException


async def invoke(
    func: Callable[[], Any],
    timeout: float | None = None,
    operation: str = "operation",
) -> Any:
    """Call a sync or async producer and return its (awaited) result.

    With ``timeout`` set, an awaitable result is bounded by ``asyncio.wait_for``
    and overrunning it raises ``AttemptTimeoutException``. Synchronous
    producers cannot be interrupted and run to completion.
    """
    result = func()
    if not inspect.isawaitable(result):
        return result
    if timeout is None:
        return await result
    try:
        return await asyncio.wait_for(result, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise AttemptTimeoutException(operation, timeout) from e
