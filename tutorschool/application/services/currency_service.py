"""
Currency exchange service.

Serves exchange rates from the provider through a TTL cache. When the
provider fails, approximate rates derived from a static USD table are
returned instead; those are never cached so the next call retries the
provider.

Dependencies: tutorschool.boundary.currency, tutorschool.core.cache
System role: Currency conversion for subscription pricing
"""

import logging

from tutorschool.boundary.currency.exchange_rate_client import ExchangeRateClient
from tutorschool.core.cache import TTLCache
from tutorschool.core.currencies import SUPPORTED_CURRENCIES, fallback_rates
from tutorschool.core.exceptions import ExchangeRateError, UnsupportedCurrencyError

logger = logging.getLogger(__name__)


class CurrencyService:
    """
    Exchange rate lookups and conversion.

    Attributes:
        client: Provider client
        cache: Rates per base currency
    """

    def __init__(
        self,
        client: ExchangeRateClient,
        cache: TTLCache[str, dict[str, float]],
    ) -> None:
        self.client = client
        self.cache = cache

    async def get_exchange_rates(self, base_currency: str = "USD") -> dict[str, float]:
        """
        Get rates for one unit of base_currency.

        Args:
            base_currency: ISO 4217 code, case-insensitive

        Returns:
            dict mapping currency code to rate
        """
        base = base_currency.upper()
        cached = self.cache.get(base)
        if cached is not None:
            return cached

        try:
            rates = await self.client.fetch_rates(base)
        except ExchangeRateError as e:
            logger.warning(
                "Exchange rate provider unavailable, using fallback rates",
                extra={"base_currency": base, "error": str(e)},
            )
            return fallback_rates(base)

        self.cache.set(base, rates)
        return rates

    async def get_exchange_rate(self, from_currency: str, to_currency: str) -> float:
        """
        Get the rate converting from_currency into to_currency.

        Raises:
            UnsupportedCurrencyError: If no rate is known for to_currency
        """
        source = from_currency.upper()
        target = to_currency.upper()
        if source == target:
            return 1.0

        rates = await self.get_exchange_rates(source)
        if target not in rates:
            raise UnsupportedCurrencyError(target)
        return rates[target]

    async def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        rate = await self.get_exchange_rate(from_currency, to_currency)
        return amount * rate

    def supported_currencies(self) -> list[dict[str, str]]:
        return [dict(currency) for currency in SUPPORTED_CURRENCIES]
