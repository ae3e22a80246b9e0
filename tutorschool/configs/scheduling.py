"""
Scheduling configuration settings.

Controls the teacher schedule conflict check.

Dependencies: pydantic, pydantic_settings
System role: Conflict validator behaviour switches
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tutorschool.configs.base import BaseSettings


class SchedulingSettings(BaseSettings):
    """Teacher schedule validation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SCHEDULING_",
        case_sensitive=False,
        extra="ignore",
    )

    fail_open: bool = Field(
        default=True,
        description="Report no conflict when the session query fails instead of raising",
    )
    default_duration_minutes: int = Field(
        default=60,
        gt=0,
        description="Duration assumed for stored sessions without one",
    )
