"""
Core business logic module.

Contains the evaluation agent (schema, prompts, Gemini clients) and the
exception hierarchy shared across the application.
"""

from ignite.core.exceptions import (
    AnalysisTimeoutError,
    AnalysisTransportError,
    AnalysisValidationError,
    ConfigurationError,
    EvaluationFailedError,
    IgniteException,
    ImageUnavailableError,
)

__all__ = [
    "IgniteException",
    "ConfigurationError",
    "EvaluationFailedError",
    "AnalysisTransportError",
    "AnalysisTimeoutError",
    "AnalysisValidationError",
    "ImageUnavailableError",
]
