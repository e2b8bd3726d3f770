"""Image client for best-effort hero image generation.

Calls the Gemini image model and returns the first inline image part found
in the response. Failures never propagate: a missing image only degrades the
evaluation.

Dependencies: logging, asyncio, google.genai, schema
System role: Second stage of the evaluation pipeline
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from ignite.core.evaluation_agent.agent.evaluation_schema import HeroImage
from ignite.core.exceptions import ImageUnavailableError

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_MIME_TYPE = "image/png"


def extract_hero_image(response: Any) -> HeroImage | None:
    """Return the first inline image part of a Gemini response.

    Scans candidates and their content parts in order.

    Args:
        response: GenerateContentResponse from the image model

    Returns:
        HeroImage | None: First embedded image, or None when there is none
    """
    for candidate in response.candidates or []:
        content = getattr(candidate, "content", None)
        if content is None:
            continue
        for part in content.parts or []:
            inline_data = getattr(part, "inline_data", None)
            if inline_data and inline_data.data:
                return HeroImage(
                    mime_type=inline_data.mime_type or DEFAULT_IMAGE_MIME_TYPE,
                    data=inline_data.data,
                )
    return None


class ImageClient:
    """Single-shot hero image generation against Gemini."""

    def __init__(
        self,
        google_client: "genai.Client",
        model_id: str = "gemini-2.5-flash-image",
        timeout_seconds: float = 120.0,
    ) -> None:
        """Initialize image client.

        Args:
            google_client: Google Generative AI client
            model_id: Image model identifier
            timeout_seconds: Ceiling for one call
        """
        self._google_client = google_client
        self._model_id = model_id
        self._timeout_seconds = timeout_seconds

    @property
    def model_id(self) -> str:
        """Model used for image calls."""
        return self._model_id

    async def _generate(self, prompt: str) -> Any:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(
                    self._google_client.models.generate_content,
                    model=self._model_id,
                    contents=prompt,
                ),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise ImageUnavailableError(
                "Image call timed out",
                {"timeout_seconds": self._timeout_seconds},
            ) from e
        except Exception as e:
            raise ImageUnavailableError(
                f"Image request failed: {type(e).__name__}",
                {"error_msg": str(e)[:200]},
            ) from e

    async def submit(self, prompt: str) -> HeroImage | None:
        """Generate a hero image for the prompt.

        Args:
            prompt: Image prompt from build_image_prompt

        Returns:
            HeroImage | None: Generated image, or None when unavailable
        """
        logger.info(
            f"{__name__}:submit - START model={self._model_id}, prompt_len={len(prompt)}"
        )
        try:
            response = await self._generate(prompt)
        except ImageUnavailableError as e:
            logger.warning(f"{__name__}:submit - Image unavailable: {e}")
            return None

        try:
            image = extract_hero_image(response)
        except Exception as e:
            logger.warning(
                f"{__name__}:submit - Malformed image response - {type(e).__name__}: {e}"
            )
            return None

        if image is None:
            logger.info(f"{__name__}:submit - END no inline image in response")
            return None

        logger.info(
            f"{__name__}:submit - END image_bytes={len(image.data)}, "
            f"mime_type={image.mime_type}"
        )
        return image
