"""
Health check API endpoints.

Routes: GET /health, GET /health/gemini

Dependencies: fastapi, pydantic, ignite.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ignite.configs import Settings, get_settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class GeminiHealthResponse(HealthResponse):
    """Gemini configuration report. Never carries the key itself."""

    analysis_model: str
    image_model: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/gemini", response_model=GeminiHealthResponse)
async def health_check_gemini(
    settings: Settings = Depends(get_settings),
) -> GeminiHealthResponse:
    """Report whether evaluations can reach Gemini with the current config."""
    gemini = settings.gemini
    configured = gemini.api_key is not None and bool(gemini.api_key.get_secret_value())
    return GeminiHealthResponse(
        status="healthy" if configured else "unconfigured",
        message="Gemini API key configured" if configured else "GEMINI_API_KEY is not set",
        analysis_model=gemini.analysis_model,
        image_model=gemini.image_model,
    )
