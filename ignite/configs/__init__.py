"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from ignite.configs.gemini import GeminiSettings
from ignite.configs.settings import Settings, get_settings

__all__ = ["GeminiSettings", "Settings", "get_settings"]
