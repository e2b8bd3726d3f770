"""Gemini clients for the evaluation pipeline."""

from ignite.core.evaluation_agent.clients.analysis_client import AnalysisClient
from ignite.core.evaluation_agent.clients.google_client import create_google_client
from ignite.core.evaluation_agent.clients.image_client import (
    ImageClient,
    extract_hero_image,
)

__all__ = [
    "AnalysisClient",
    "ImageClient",
    "create_google_client",
    "extract_hero_image",
]
