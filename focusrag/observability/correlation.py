"""
Correlation ID propagation.

Each HTTP request or WebSocket search runs inside a correlation scope; log
records emitted anywhere below it carry the scope's ID.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

_correlation_id: ContextVar[str | None] = ContextVar("focusrag_correlation_id", default=None)


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def get_correlation_id() -> str | None:
    """Correlation ID of the current scope, or None outside any scope."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation ID for the duration of a block.

    Args:
        correlation_id: Caller-supplied ID, a new one is generated when empty

    Yields:
        str: The bound correlation ID
    """
    value = correlation_id or new_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
