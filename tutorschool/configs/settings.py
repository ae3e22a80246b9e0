"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from tutorschool.configs.base import BaseSettings
from tutorschool.configs.currency import CurrencySettings
from tutorschool.configs.database import DatabaseSettings
from tutorschool.configs.scheduling import SchedulingSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    scheduling: SchedulingSettings = SchedulingSettings()
    currency: CurrencySettings = CurrencySettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from tutorschool.configs import get_settings
        settings = get_settings()
    """
    return Settings()
