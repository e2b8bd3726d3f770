"""
Gemini configuration settings.

Credential, model identifiers and call ceilings for the two generative calls
made during an evaluation (structured analysis and hero image).

Dependencies: pydantic, pydantic_settings
System role: External AI service configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Google Gemini configuration for analysis and image generation."""

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="Gemini API key (never logged)",
    )
    analysis_model: str = Field(
        default="gemini-3-flash-preview",
        description="Model used for the schema-constrained idea analysis",
    )
    image_model: str = Field(
        default="gemini-2.5-flash-image",
        description="Model used for hero image generation",
    )
    analysis_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Ceiling for one analysis call; expiry fails the evaluation",
    )
    image_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Ceiling for one image call; expiry drops the hero image",
    )
    http_timeout_ms: int | None = Field(
        default=None,
        gt=0,
        description=(
            "HTTP timeout passed to the genai client (milliseconds); "
            "defaults to the longer call ceiling"
        ),
    )

    @property
    def resolved_http_timeout_ms(self) -> int:
        """HTTP timeout in milliseconds, never longer than a call ceiling by default."""
        if self.http_timeout_ms is not None:
            return self.http_timeout_ms
        ceiling = max(self.analysis_timeout_seconds, self.image_timeout_seconds)
        return int(ceiling * 1000)
