"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_evaluation_orchestrator,
    get_service_cache,
)

__all__ = [
    "get_evaluation_orchestrator",
    "get_service_cache",
]
