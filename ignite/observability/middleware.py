"""
FastAPI middleware for observability.

CorrelationMiddleware binds the request's correlation ID for the whole
request and echoes it back; RequestLoggingMiddleware writes one line when a
request arrives and one when it completes. Health probes are logged at DEBUG
so polling does not drown out evaluation traffic.

Dependencies: fastapi, starlette, ignite.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ignite.observability.correlation import correlation_scope

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATH_SUFFIXES = ("/health", "/health/gemini")


def _log_level_for(path: str) -> int:
    return logging.DEBUG if path.endswith(QUIET_PATH_SUFFIXES) else logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every HTTP request."""

    async def dispatch(self, request: Request, call_next):
        """
        Log HTTP request and response with timing.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        method = request.method
        path = request.url.path
        level = _log_level_for(path)
        started = time.perf_counter()

        logger.log(level, f"{method} {path}", extra={"method": method, "path": path})

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Unhandled {type(e).__name__}",
                extra={
                    "method": method,
                    "path": path,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
            raise

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.log(
            level,
            f"{method} {path} - {response.status_code} in {duration_ms}ms",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind ``X-Correlation-ID`` (or a fresh ID) for the request's lifetime."""

    async def dispatch(self, request: Request, call_next):
        """
        Run the request inside a correlation scope.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response carrying the correlation ID header
        """
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            response: Response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
