"""
Server-level configuration shared by every settings class.

Covers how the process runs (environment, logging, bind address, CORS)
rather than what it calls.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Process settings read from the environment and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment environment label (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable uvicorn auto-reload",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for configure_logging",
    )
    host: str = Field(default="localhost", description="Bind address for uvicorn")
    port: int = Field(default=8082, ge=1, le=65535, description="Bind port for uvicorn")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level
