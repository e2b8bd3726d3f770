"""Evaluation agent schemas and prompts.

Exports the structured-output contract and prompt builders.
"""

from ignite.core.evaluation_agent.agent.analysis_prompt import (
    build_analysis_prompt,
    is_submittable,
)
from ignite.core.evaluation_agent.agent.evaluation_schema import (
    ANALYSIS_RESPONSE_SCHEMA,
    AnalysisResult,
    DataPoint,
    HeroImage,
    Improvements,
    SwotAnalysis,
)
from ignite.core.evaluation_agent.agent.image_generation_prompt import (
    build_image_prompt,
)

__all__ = [
    "ANALYSIS_RESPONSE_SCHEMA",
    "AnalysisResult",
    "DataPoint",
    "HeroImage",
    "Improvements",
    "SwotAnalysis",
    "build_analysis_prompt",
    "build_image_prompt",
    "is_submittable",
]
