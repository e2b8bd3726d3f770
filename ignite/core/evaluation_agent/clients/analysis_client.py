"""Analysis client for schema-constrained idea evaluation.

Sends the analysis prompt to Gemini with ANALYSIS_RESPONSE_SCHEMA attached,
then validates the returned JSON against AnalysisResult. Every failure mode
(transport, timeout, empty text, malformed JSON, schema mismatch) is raised
as an EvaluationFailedError subclass.

Dependencies: asyncio, google.genai, pydantic, schema
System role: First stage of the evaluation pipeline
"""

import asyncio
import logging
from typing import TYPE_CHECKING

from google.genai import types
from pydantic import ValidationError

from ignite.core.evaluation_agent.agent.evaluation_schema import (
    ANALYSIS_RESPONSE_SCHEMA,
    AnalysisResult,
)
from ignite.core.exceptions import (
    AnalysisTimeoutError,
    AnalysisTransportError,
    AnalysisValidationError,
)

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)


class AnalysisClient:
    """Single-shot structured analysis against Gemini.

    Holds no state between calls and performs no retries.
    """

    def __init__(
        self,
        google_client: "genai.Client",
        model_id: str = "gemini-3-flash-preview",
        timeout_seconds: float = 120.0,
    ) -> None:
        """Initialize analysis client.

        Args:
            google_client: Google Generative AI client
            model_id: Structured-output model identifier
            timeout_seconds: Ceiling for one call
        """
        self._google_client = google_client
        self._model_id = model_id
        self._timeout_seconds = timeout_seconds

    @property
    def model_id(self) -> str:
        """Model used for analysis calls."""
        return self._model_id

    def _build_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=ANALYSIS_RESPONSE_SCHEMA,
        )

    async def submit(self, prompt: str) -> AnalysisResult:
        """Request and validate a structured analysis.

        Args:
            prompt: Analysis prompt from build_analysis_prompt

        Returns:
            AnalysisResult: Fully validated analysis

        Raises:
            AnalysisTimeoutError: If the call exceeds the ceiling
            AnalysisTransportError: If the service call fails
            AnalysisValidationError: If the payload is empty, malformed or off-schema
        """
        logger.info(
            f"{__name__}:submit - START model={self._model_id}, prompt_len={len(prompt)}"
        )

        # Step 1: Call Gemini with the response schema attached
        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self._google_client.models.generate_content,
                    model=self._model_id,
                    contents=prompt,
                    config=self._build_config(),
                ),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error(
                f"{__name__}:submit - FAILED at Gemini API call - "
                f"timeout after {self._timeout_seconds}s"
            )
            raise AnalysisTimeoutError(
                self._timeout_seconds, model=self._model_id
            ) from e
        except Exception as e:
            logger.error(
                f"{__name__}:submit - FAILED at Gemini API call - "
                f"{type(e).__name__}: {e}",
                exc_info=True,
            )
            raise AnalysisTransportError(
                f"Analysis request failed: {type(e).__name__}",
                model=self._model_id,
                details={"error_msg": str(e)[:200]},
            ) from e

        # Step 2: Validate the payload against the contract
        text = response.text
        if not text or not text.strip():
            logger.error(f"{__name__}:submit - FAILED at validation - empty response text")
            raise AnalysisValidationError(
                "Analysis response contained no text", model=self._model_id
            )

        try:
            result = AnalysisResult.model_validate_json(text)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_input=False)
            logger.error(
                f"{__name__}:submit - FAILED at validation - "
                f"{e.error_count()} error(s), first={errors[0] if errors else None}"
            )
            raise AnalysisValidationError(
                "Analysis response did not match the schema",
                model=self._model_id,
                details={
                    "error_count": e.error_count(),
                    "locations": [list(err["loc"]) for err in errors[:10]],
                },
            ) from e

        logger.info(
            f"{__name__}:submit - END score={result.evaluation_score}, "
            f"strengths={len(result.swot.strengths)}, "
            f"revenue_points={len(result.revenue_potential)}"
        )
        return result
