"""Google Gemini client factory.

Builds the single genai.Client shared by the analysis and image clients.

Dependencies: google.genai, configs
System role: Credential injection point for external AI services
"""

import logging

from google import genai
from google.genai import types

from ignite.configs import GeminiSettings
from ignite.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_google_client(settings: GeminiSettings) -> genai.Client:
    """Create a Gemini client from settings.

    Args:
        settings: Gemini settings carrying the API key and HTTP timeout

    Returns:
        genai.Client: Authenticated client

    Raises:
        ConfigurationError: If no API key is configured
    """
    if settings.api_key is None or not settings.api_key.get_secret_value():
        raise ConfigurationError(
            "Gemini API key is not configured", setting="GEMINI_API_KEY"
        )

    logger.debug(
        f"{__name__}:create_google_client - Creating Google Gemini client "
        f"http_timeout_ms={settings.resolved_http_timeout_ms}"
    )
    return genai.Client(
        api_key=settings.api_key.get_secret_value(),
        http_options=types.HttpOptions(timeout=settings.resolved_http_timeout_ms),
    )
