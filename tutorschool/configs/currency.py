"""
Currency exchange configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Exchange rate provider and cache configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from tutorschool.configs.base import BaseSettings


class CurrencySettings(BaseSettings):
    """Exchange rate API configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CURRENCY_",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = Field(
        default="https://api.exchangerate-api.com/v4/latest",
        description="Exchange rate endpoint, base currency is appended as a path segment",
    )
    cache_ttl_seconds: float = Field(
        default=3600.0,
        gt=0,
        description="Lifetime of cached exchange rates",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="HTTP timeout for exchange rate requests",
    )
    default_base_currency: str = Field(default="USD", description="Base currency when none given")
