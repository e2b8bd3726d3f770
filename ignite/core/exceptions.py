"""
Exception hierarchy for the IgniteAI evaluation backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class IgniteException(Exception):
    """Base exception for all IgniteAI application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(IgniteException):
    """Raised when required configuration (e.g. the API key) is missing."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the missing or invalid setting
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class EvaluationFailedError(IgniteException):
    """Raised when a validated analysis could not be produced.

    Callers treat every subclass identically; ``reason`` only exists for
    operator-side diagnostics.
    """

    reason: str = "unknown"

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize evaluation failure.

        Args:
            message: Error message
            model: Model identifier the failing call targeted
            details: Additional context
        """
        details = details or {}
        details["reason"] = self.reason
        if model:
            details["model"] = model
        super().__init__(message, details)


class AnalysisTransportError(EvaluationFailedError):
    """Raised when the analysis service call itself fails (network, non-2xx)."""

    reason = "transport"


class AnalysisTimeoutError(EvaluationFailedError):
    """Raised when the analysis call exceeds its ceiling."""

    reason = "timeout"

    def __init__(
        self,
        timeout_seconds: float,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize timeout error.

        Args:
            timeout_seconds: Ceiling that expired
            model: Model identifier
            details: Additional context
        """
        details = details or {}
        details["timeout_seconds"] = timeout_seconds
        super().__init__(
            f"Analysis call exceeded {timeout_seconds}s", model, details
        )


class AnalysisValidationError(EvaluationFailedError):
    """Raised when the analysis payload is empty, malformed or off-schema."""

    reason = "validation"


class ImageUnavailableError(IgniteException):
    """Raised inside the image client when no hero image can be produced.

    Never escapes the client; converted to ``None`` there.
    """

    pass
