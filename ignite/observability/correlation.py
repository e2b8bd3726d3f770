"""
Correlation IDs for HTTP requests and evaluations.

A request carries the id from its ``X-Correlation-ID`` header; an evaluation
runs under its own ``evaluation_id`` inside the pipeline task. Both are held
in one ContextVar so every log line can be tied back to its origin.

Dependencies: contextvars
System role: Request and evaluation tracing across service boundaries
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator
import uuid

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def new_correlation_id() -> str:
    """Return a fresh random correlation ID."""
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    """
    Get current correlation ID from context.

    Returns:
        str: Active correlation ID, empty string outside any scope
    """
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation ID for the duration of a block.

    The previous value is restored on exit, so scopes nest and never leak
    into the caller.

    Args:
        correlation_id: ID to bind (a new one is generated when empty)

    Yields:
        str: The bound correlation ID
    """
    value = correlation_id or new_correlation_id()
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
