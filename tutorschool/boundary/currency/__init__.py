"""Exchange rate provider adapter."""

from tutorschool.boundary.currency.exchange_rate_client import ExchangeRateClient

__all__ = ["ExchangeRateClient"]
