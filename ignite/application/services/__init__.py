"""Application services."""

from ignite.application.services.evaluation_orchestrator import (
    EvaluationOrchestrator,
    StateListener,
)

__all__ = ["EvaluationOrchestrator", "StateListener"]
