"""Correlation IDs shared by the log lines and errors of one agent task.

A task (a tool call, an inference request) runs inside ``correlation_scope``.
Retry, fallback and recovery log events emitted inside the scope carry the
ID, and resilience exceptions raised there record it.
"""

import contextvars
import uuid
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from typing import Any

CORRELATION_ID_KEY = "correlation_id"

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    CORRELATION_ID_KEY, default=None
)


def get_correlation_id() -> str | None:
    """ID bound to the current context, if any."""
    return _correlation_id.get()


def new_correlation_id() -> str:
    return uuid.uuid4().hex


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Bind ``correlation_id`` (or a fresh one) for the enclosed block.

    Nested scopes restore the outer ID on exit. Tasks created inside the
    block inherit the ID through ``contextvars``.
    """
    bound = correlation_id or new_correlation_id()
    token = _correlation_id.set(bound)
    try:
        yield bound
    finally:
        _correlation_id.reset(token)


@contextmanager
def ensure_correlation_id() -> Iterator[str]:
    """Reuse the active ID, or open a new scope when none is bound."""
    current = get_correlation_id()
    if current is not None:
        yield current
        return
    with correlation_scope() as bound:
        yield bound


def add_correlation_id(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor stamping the active ID onto each event.

    An explicit ``correlation_id`` passed to the log call wins.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault(CORRELATION_ID_KEY, correlation_id)
    return event_dict
