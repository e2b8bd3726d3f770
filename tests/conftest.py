"""
Shared test fixtures and configuration for entire test suite.

Provides: Sample analysis payloads, Gemini response builders, client mocks
Dependencies: pytest, google.genai.types
System role: Test infrastructure and fixture management
"""

import copy
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types

from ignite.core.evaluation_agent.agent.evaluation_schema import (
    AnalysisResult,
    HeroImage,
)

DOG_WALKING_IDEA = "AI-powered dog walking app"

DOG_WALKING_PAYLOAD = {
    "swot": {
        "strengths": ["Niche market"],
        "weaknesses": [],
        "opportunities": [],
        "threats": [],
    },
    "riskAssessment": "Low",
    "strategicSuggestions": ["Partner with vets"],
    "solutions": [],
    "improvements": {"businessPlan": [], "marketing": []},
    "evaluationScore": 72,
    "marketTrends": [{"name": "2024", "value": 10}],
    "revenuePotential": [{"name": "Y1", "value": 1000}],
    "marketShare": [{"name": "Us", "value": 5}],
    "summary": "Promising niche.",
}

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


def make_text_response(text: str | None) -> types.GenerateContentResponse:
    """Build a Gemini response whose single candidate carries ``text``."""
    if text is None:
        return types.GenerateContentResponse(candidates=[])
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)])
            )
        ]
    )


def make_parts_response(parts: list[types.Part]) -> types.GenerateContentResponse:
    """Build a Gemini response with the given content parts."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
    )


def image_part(data: bytes = PNG_BYTES, mime_type: str | None = "image/png") -> types.Part:
    """Build a content part carrying inline image data."""
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


@pytest.fixture
def analysis_payload() -> dict:
    """Provide a schema-conformant analysis payload (fresh copy per test)."""
    return copy.deepcopy(DOG_WALKING_PAYLOAD)


@pytest.fixture
def analysis_json(analysis_payload: dict) -> str:
    """Provide the analysis payload as JSON text."""
    return json.dumps(analysis_payload)


@pytest.fixture
def analysis_result(analysis_payload: dict) -> AnalysisResult:
    """Provide a validated AnalysisResult."""
    return AnalysisResult.model_validate(analysis_payload)


@pytest.fixture
def hero_image() -> HeroImage:
    """Provide a small hero image."""
    return HeroImage(mime_type="image/png", data=PNG_BYTES)


@pytest.fixture
def mock_google_client() -> MagicMock:
    """
    Create mock genai.Client.

    Returns:
        MagicMock: Client whose models.generate_content is a plain MagicMock
    """
    client = MagicMock()
    client.models.generate_content = MagicMock()
    return client


@pytest.fixture
def mock_analysis_client(analysis_result: AnalysisResult) -> AsyncMock:
    """Provide analysis client mock returning the sample result."""
    client = AsyncMock()
    client.submit = AsyncMock(return_value=analysis_result)
    return client


@pytest.fixture
def mock_image_client(hero_image: HeroImage) -> AsyncMock:
    """Provide image client mock returning the sample hero image."""
    client = AsyncMock()
    client.submit = AsyncMock(return_value=hero_image)
    return client
