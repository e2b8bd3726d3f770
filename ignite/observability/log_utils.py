"""
Logging helpers that keep payloads and credentials out of log lines.

Values attached as ``extra`` context are reduced to short, safe strings:
image bytes become their size, secrets are masked, collections are counted
and long text is truncated. IgniteException details are merged into the
context of error records automatically.

Dependencies: logging (stdlib), pydantic, ignite.core.exceptions
System role: Logging helper functions
"""

import logging
from typing import Any

from pydantic import BaseModel, SecretStr

from ignite.core.exceptions import IgniteException

MASK = "**********"


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Reduce any value to a short string that is safe to log.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, SecretStr):
        return MASK
    if isinstance(value, (bytes, bytearray)):
        return f"bytes({len(value)})"
    if isinstance(value, BaseModel):
        return type(value).__name__
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    try:
        text = str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with every context value passed through safe_log_value.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached as record attributes
    """
    logger.log(
        level,
        message,
        extra={key: safe_log_value(val) for key, val in context.items()},
    )


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception at ERROR with traceback and context.

    For IgniteException subclasses the exception's ``details`` (reason,
    model, ...) are added to the context; explicit keyword context wins.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional key-value pairs
    """
    merged: dict[str, Any] = {}
    if isinstance(exc, IgniteException):
        merged.update(exc.details)
    merged.update(context)

    extra = {key: safe_log_value(val) for key, val in merged.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(getattr(exc, "message", str(exc)))
    logger.error(message, exc_info=exc, extra=extra)
