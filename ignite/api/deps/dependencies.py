"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: ignite.configs, ignite.application, ignite.core
System role: DI container for service injection
"""

from ignite.application.services import EvaluationOrchestrator
from ignite.configs import get_settings


class ServiceCache:
    """Container for cached service instances.

    The orchestrator owns the application's only evaluation state, so exactly
    one instance lives per process.
    """

    def __init__(self):
        self._google_client = None
        self._orchestrator = None

    @property
    def google_client(self):
        """Get cached Gemini client."""
        if self._google_client is None:
            from ignite.core.evaluation_agent.clients import create_google_client

            self._google_client = create_google_client(get_settings().gemini)
        return self._google_client

    @property
    def orchestrator(self) -> EvaluationOrchestrator:
        """Get cached evaluation orchestrator."""
        if self._orchestrator is None:
            from ignite.core.evaluation_agent.clients import (
                AnalysisClient,
                ImageClient,
            )

            gemini = get_settings().gemini
            self._orchestrator = EvaluationOrchestrator(
                analysis_client=AnalysisClient(
                    google_client=self.google_client,
                    model_id=gemini.analysis_model,
                    timeout_seconds=gemini.analysis_timeout_seconds,
                ),
                image_client=ImageClient(
                    google_client=self.google_client,
                    model_id=gemini.image_model,
                    timeout_seconds=gemini.image_timeout_seconds,
                ),
            )
        return self._orchestrator

    def clear(self) -> None:
        """Clear all cached instances."""
        self._google_client = None
        self._orchestrator = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_evaluation_orchestrator() -> EvaluationOrchestrator:
    """
    Get the process-wide evaluation orchestrator.

    Returns:
        EvaluationOrchestrator: Orchestrator wired with Gemini clients
    """
    return get_service_cache().orchestrator
