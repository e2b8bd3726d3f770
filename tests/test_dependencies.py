"""
Test suite for dependency injection container.

Tests ServiceCache wiring of the Gemini client, the two pipeline clients and
the process-wide orchestrator, plus the Gemini client factory.

System role: Verification of DI container
"""

from unittest.mock import MagicMock, patch

import pytest
from google.genai import types

from ignite.api.deps import get_evaluation_orchestrator, get_service_cache
from ignite.api.deps.dependencies import ServiceCache
from ignite.application.services import EvaluationOrchestrator
from ignite.configs import GeminiSettings, Settings
from ignite.core.evaluation_agent.clients import AnalysisClient, ImageClient
from ignite.core.evaluation_agent.clients.google_client import create_google_client
from ignite.core.exceptions import ConfigurationError


@pytest.fixture
def settings() -> Settings:
    """Provide settings with a key and custom model ids."""
    return Settings(
        _env_file=None,
        gemini=GeminiSettings(
            _env_file=None,
            api_key="test-key",
            analysis_model="analysis-test",
            image_model="image-test",
            analysis_timeout_seconds=30.0,
            image_timeout_seconds=10.0,
        ),
    )


@pytest.fixture
def cache(settings: Settings):
    """Provide a fresh ServiceCache with settings and client creation patched."""
    with patch(
        "ignite.api.deps.dependencies.get_settings", return_value=settings
    ), patch(
        "ignite.core.evaluation_agent.clients.create_google_client"
    ) as mock_create:
        mock_create.return_value = MagicMock()
        yield ServiceCache()


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_orchestrator_should_be_built_once(self, cache: ServiceCache) -> None:
        """Test repeated access returns the same orchestrator."""
        first = cache.orchestrator
        second = cache.orchestrator

        assert isinstance(first, EvaluationOrchestrator)
        assert first is second

    def test_orchestrator_should_use_configured_models(
        self, cache: ServiceCache
    ) -> None:
        """Test model ids flow from settings into both clients."""
        orchestrator = cache.orchestrator

        analysis_client = orchestrator._analysis_client
        image_client = orchestrator._image_client
        assert isinstance(analysis_client, AnalysisClient)
        assert isinstance(image_client, ImageClient)
        assert analysis_client.model_id == "analysis-test"
        assert image_client.model_id == "image-test"

    def test_clients_should_share_one_google_client(self, cache: ServiceCache) -> None:
        """Test a single genai client backs both calls."""
        orchestrator = cache.orchestrator

        assert (
            orchestrator._analysis_client._google_client
            is orchestrator._image_client._google_client
        )

    def test_clear_should_drop_cached_instances(self, cache: ServiceCache) -> None:
        """Test clear forces a rebuild."""
        first = cache.orchestrator
        cache.clear()

        assert cache.orchestrator is not first


class TestGetEvaluationOrchestrator:
    """Test suite for the FastAPI dependency."""

    def test_should_return_cached_orchestrator(self) -> None:
        """Test the dependency delegates to the global cache."""
        sentinel = MagicMock(spec=EvaluationOrchestrator)
        with patch.object(
            type(get_service_cache()), "orchestrator", new=sentinel
        ):
            assert get_evaluation_orchestrator() is sentinel


class TestCreateGoogleClient:
    """Test suite for the Gemini client factory."""

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_should_require_api_key(self, api_key) -> None:
        """Test a missing key is a configuration error."""
        settings = GeminiSettings(_env_file=None, api_key=api_key)

        with pytest.raises(ConfigurationError) as exc_info:
            create_google_client(settings)

        assert exc_info.value.details["setting"] == "GEMINI_API_KEY"

    def test_should_pass_key_and_timeout(self) -> None:
        """Test the key and HTTP timeout reach genai.Client."""
        settings = GeminiSettings(
            _env_file=None, api_key="test-key", http_timeout_ms=60_000
        )

        with patch(
            "ignite.core.evaluation_agent.clients.google_client.genai.Client"
        ) as mock_client:
            client = create_google_client(settings)

        assert client is mock_client.return_value
        kwargs = mock_client.call_args.kwargs
        assert kwargs["api_key"] == "test-key"
        assert isinstance(kwargs["http_options"], types.HttpOptions)
        assert kwargs["http_options"].timeout == 60_000

    def test_should_derive_timeout_from_call_ceilings(self) -> None:
        """Test the default HTTP timeout matches the longer call ceiling."""
        settings = GeminiSettings(
            _env_file=None,
            api_key="test-key",
            analysis_timeout_seconds=30.0,
            image_timeout_seconds=10.0,
        )

        with patch(
            "ignite.core.evaluation_agent.clients.google_client.genai.Client"
        ) as mock_client:
            create_google_client(settings)

        assert mock_client.call_args.kwargs["http_options"].timeout == 30_000
