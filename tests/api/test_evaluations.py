"""
Test suite for the evaluation HTTP endpoints.

Route logic is tested against a MagicMock orchestrator; serialization of real
snapshots against an EvaluationOrchestrator with mocked Gemini clients.

System role: Verification of the idea evaluation HTTP API
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from ignite.api.deps import get_evaluation_orchestrator
from ignite.api.routers.evaluations import IN_PROGRESS_DETAIL
from ignite.application.services import EvaluationOrchestrator
from ignite.core.exceptions import AnalysisTransportError
from ignite.main import create_app
from ignite.models.evaluation import (
    EVALUATION_FAILED_MESSAGE,
    IdleState,
    LoadingState,
)
from tests.conftest import DOG_WALKING_IDEA


@pytest.fixture
def orchestrator(
    mock_analysis_client: AsyncMock, mock_image_client: AsyncMock
) -> EvaluationOrchestrator:
    """Provide a real orchestrator over mocked clients."""
    return EvaluationOrchestrator(
        analysis_client=mock_analysis_client,
        image_client=mock_image_client,
    )


@pytest.fixture
def mock_orchestrator() -> MagicMock:
    """Provide an idle orchestrator mock."""
    orchestrator = MagicMock(spec=EvaluationOrchestrator)
    orchestrator.state = IdleState()
    orchestrator.is_loading = False
    return orchestrator


def _client_for(orchestrator) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_evaluation_orchestrator] = lambda: orchestrator
    return TestClient(app)


class TestGetEvaluationState:
    """Test suite for GET /api/v1/evaluations/state."""

    def test_should_return_idle_initially(
        self, orchestrator: EvaluationOrchestrator
    ) -> None:
        """Test a fresh orchestrator reports idle."""
        response = _client_for(orchestrator).get("/api/v1/evaluations/state")

        assert response.status_code == 200
        assert response.json() == {"status": "idle"}

    def test_should_serialize_success_with_camel_case_result(
        self, orchestrator: EvaluationOrchestrator, analysis_payload: dict
    ) -> None:
        """Test a Success snapshot carries the analysis and a data URI."""
        # Arrange
        asyncio.run(orchestrator.evaluate(DOG_WALKING_IDEA))

        # Act
        response = _client_for(orchestrator).get("/api/v1/evaluations/state")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        assert body["result"] == analysis_payload
        assert body["result"]["evaluationScore"] == 72
        assert body["hero_image"]["mime_type"] == "image/png"
        assert body["hero_image"]["data_uri"].startswith("data:image/png;base64,")
        assert "data" not in body["hero_image"]

    def test_should_serialize_error_message(
        self, orchestrator: EvaluationOrchestrator, mock_analysis_client: AsyncMock
    ) -> None:
        """Test an Error snapshot carries the fixed user-facing message."""
        mock_analysis_client.submit.side_effect = AnalysisTransportError("HTTP 500")
        asyncio.run(orchestrator.evaluate(DOG_WALKING_IDEA))

        response = _client_for(orchestrator).get("/api/v1/evaluations/state")

        assert response.json() == {
            "status": "error",
            "message": EVALUATION_FAILED_MESSAGE,
        }


class TestSubmitEvaluation:
    """Test suite for POST /api/v1/evaluations."""

    def test_should_accept_idea_and_return_loading(
        self, orchestrator: EvaluationOrchestrator
    ) -> None:
        """Test a real submission answers 202 with the loading snapshot."""
        response = _client_for(orchestrator).post(
            "/api/v1/evaluations", json={"idea": DOG_WALKING_IDEA}
        )

        assert response.status_code == 202
        assert response.json() == {"status": "loading"}

    def test_should_ignore_whitespace_idea(self, mock_orchestrator: MagicMock) -> None:
        """Test blank ideas answer 200 with the unchanged state."""
        response = _client_for(mock_orchestrator).post(
            "/api/v1/evaluations", json={"idea": "   "}
        )

        assert response.status_code == 200
        assert response.json() == {"status": "idle"}
        mock_orchestrator.start.assert_not_called()

    def test_should_reject_while_loading(self, mock_orchestrator: MagicMock) -> None:
        """Test a second submission during loading answers 409."""
        mock_orchestrator.start.return_value = None
        mock_orchestrator.state = LoadingState()
        mock_orchestrator.is_loading = True

        response = _client_for(mock_orchestrator).post(
            "/api/v1/evaluations", json={"idea": DOG_WALKING_IDEA}
        )

        assert response.status_code == 409
        assert response.json()["detail"] == IN_PROGRESS_DETAIL

    def test_should_pass_raw_idea_to_orchestrator(
        self, mock_orchestrator: MagicMock
    ) -> None:
        """Test the idea text is handed over unchanged."""
        mock_orchestrator.start.return_value = MagicMock()

        _client_for(mock_orchestrator).post(
            "/api/v1/evaluations", json={"idea": DOG_WALKING_IDEA}
        )

        mock_orchestrator.start.assert_called_once_with(DOG_WALKING_IDEA)

    def test_should_require_idea(self, mock_orchestrator: MagicMock) -> None:
        """Test a body without idea fails request validation."""
        response = _client_for(mock_orchestrator).post("/api/v1/evaluations", json={})

        assert response.status_code == 422


class TestResetEvaluation:
    """Test suite for POST /api/v1/evaluations/reset."""

    def test_should_return_to_idle_after_success(
        self, orchestrator: EvaluationOrchestrator
    ) -> None:
        """Test reset clears a finished evaluation."""
        asyncio.run(orchestrator.evaluate(DOG_WALKING_IDEA))

        response = _client_for(orchestrator).post("/api/v1/evaluations/reset")

        assert response.status_code == 200
        assert response.json() == {"status": "idle"}
        assert isinstance(orchestrator.state, IdleState)

    def test_should_reject_while_loading(self, mock_orchestrator: MagicMock) -> None:
        """Test reset during loading answers 409 and changes nothing."""
        mock_orchestrator.is_loading = True

        response = _client_for(mock_orchestrator).post("/api/v1/evaluations/reset")

        assert response.status_code == 409
        mock_orchestrator.reset.assert_not_called()
