"""Evaluation agent module.

Exports the structured-output contract, prompt builders and Gemini clients.
"""

from ignite.core.evaluation_agent.agent import (
    ANALYSIS_RESPONSE_SCHEMA,
    AnalysisResult,
    HeroImage,
    build_analysis_prompt,
    build_image_prompt,
    is_submittable,
)
from ignite.core.evaluation_agent.clients import (
    AnalysisClient,
    ImageClient,
    create_google_client,
)

__all__ = [
    "ANALYSIS_RESPONSE_SCHEMA",
    "AnalysisClient",
    "AnalysisResult",
    "HeroImage",
    "ImageClient",
    "build_analysis_prompt",
    "build_image_prompt",
    "create_google_client",
    "is_submittable",
]
