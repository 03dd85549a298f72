"""
Process settings.

Settings that come from the process environment rather than the registry:
the fallback environment name, log level, and project prefix.

Dependencies: pydantic_settings
System role: Ambient configuration for the Pulumi program
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InfraSettings(BaseSettings):
    """Settings read from INFRA_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="INFRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str | None = Field(
        default=None,
        description="Fallback environment when the stack config has none (dev, staging, prod)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    project: str = Field(
        default="my-app",
        description="Project prefix used in resource names",
    )


@lru_cache
def get_settings() -> InfraSettings:
    """
    Get process settings singleton.

    Environment variables are read once, on first call.

    Returns:
        InfraSettings: Settings instance
    """
    return InfraSettings()
