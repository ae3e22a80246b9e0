"""
Shared settings for every tutorschool config area.

Each area subclass (database, scheduling, currency) inherits the .env
loading and the application-wide fields below; area-specific fields use
their own env prefix.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Application-wide settings read without an env prefix."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name shown in the startup log",
    )
    debug: bool = Field(
        default=False,
        description="Run the FastAPI app in debug mode (tracebacks in 500 responses)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging()",
    )
