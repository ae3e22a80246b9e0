"""
Exchange rate API client.

Fetches latest rates for a base currency from an exchangerate-api.com
compatible endpoint (GET {base_url}/{BASE}).

Dependencies: httpx, tutorschool.core.exceptions
System role: Outbound HTTP adapter for the currency service
"""

import logging

import httpx

from tutorschool.core.exceptions import ExchangeRateError

logger = logging.getLogger(__name__)


class ExchangeRateClient:
    """
    Async client for the exchange rate provider.

    Attributes:
        base_url: Endpoint the base currency code is appended to
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            base_url: Endpoint, e.g. https://api.exchangerate-api.com/v4/latest
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_rates(self, base_currency: str) -> dict[str, float]:
        """
        Fetch latest rates relative to base_currency.

        Args:
            base_currency: ISO 4217 code

        Returns:
            dict[str, float]: Units of each currency per one base unit

        Raises:
            ExchangeRateError: On transport failure, non-2xx status, or a
                payload without a rates mapping
        """
        base = base_currency.upper()
        url = f"{self.base_url}/{base}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise ExchangeRateError(
                f"Exchange rate provider returned {e.response.status_code}",
                base_currency=base,
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ExchangeRateError(
                f"Failed to fetch exchange rates: {e}",
                base_currency=base,
            ) from e

        # v4 answers with "rates", v6 with "conversion_rates"
        rates = None
        if isinstance(payload, dict):
            rates = payload.get("rates") or payload.get("conversion_rates")
        if not isinstance(rates, dict) or not rates:
            raise ExchangeRateError("Exchange rate payload has no rates", base_currency=base)

        logger.debug(
            "Fetched exchange rates",
            extra={"base_currency": base, "currency_count": len(rates)},
        )
        return {code.upper(): float(rate) for code, rate in rates.items()}
