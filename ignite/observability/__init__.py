"""
Observability module.

Provides logging configuration and correlation ID tracking for requests and
evaluations.
"""

from ignite.observability.correlation import (
    correlation_scope,
    get_correlation_id,
    new_correlation_id,
)
from ignite.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
    "new_correlation_id",
]
