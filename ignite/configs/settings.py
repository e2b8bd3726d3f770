"""
Application settings.

Combines the server settings from ``base`` with the Gemini section. Read
once per process; tests build ``Settings`` directly or override
``get_settings`` as a FastAPI dependency.

Dependencies: pydantic, ignite.configs.base, ignite.configs.gemini
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from ignite.configs.base import BaseSettings
from ignite.configs.gemini import GeminiSettings


class Settings(BaseSettings):
    """Server settings plus the nested Gemini section."""

    api_prefix: str = Field(
        default="/api/v1",
        description="Path prefix for every HTTP and WebSocket route",
    )
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Load settings from the environment on first call and reuse them.

    Returns:
        Settings: Process-wide settings
    """
    return Settings()
