"""
Test suite for CurrencyService.

System role: Verification of cached exchange rate lookups and fallback
"""

from unittest.mock import AsyncMock

import pytest

from tutorschool.application.services.currency_service import CurrencyService
from tutorschool.boundary.currency import ExchangeRateClient
from tutorschool.core.cache import TTLCache
from tutorschool.core.currencies import FALLBACK_USD_RATES
from tutorschool.core.exceptions import ExchangeRateError, UnsupportedCurrencyError


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def client() -> AsyncMock:
    """Mock exchange rate client returning fixed USD rates."""
    mock = AsyncMock(spec=ExchangeRateClient)
    mock.fetch_rates.return_value = {"USD": 1.0, "EUR": 0.5, "RUB": 90.0}
    return mock


@pytest.fixture
def service(client: AsyncMock, clock: FakeClock) -> CurrencyService:
    return CurrencyService(client=client, cache=TTLCache(ttl_seconds=3600, clock=clock))


class TestGetExchangeRates:
    """Test suite for get_exchange_rates()."""

    async def test_should_cache_rates_within_ttl(self, service, client, clock) -> None:
        # Act
        first = await service.get_exchange_rates("usd")
        clock.now = 3599
        second = await service.get_exchange_rates("USD")

        # Assert
        assert first == second == {"USD": 1.0, "EUR": 0.5, "RUB": 90.0}
        client.fetch_rates.assert_awaited_once_with("USD")

    async def test_should_refetch_after_ttl(self, service, client, clock) -> None:
        await service.get_exchange_rates("USD")
        clock.now = 3600

        await service.get_exchange_rates("USD")

        assert client.fetch_rates.await_count == 2

    async def test_should_fall_back_without_caching(self, service, client) -> None:
        # Arrange
        client.fetch_rates.side_effect = ExchangeRateError("down", base_currency="USD")

        # Act
        rates = await service.get_exchange_rates("USD")
        await service.get_exchange_rates("USD")

        # Assert
        assert rates == FALLBACK_USD_RATES
        assert client.fetch_rates.await_count == 2
        assert len(service.cache) == 0


class TestConversion:
    """Test suite for get_exchange_rate() and convert()."""

    async def test_same_currency_rate_is_one_without_request(self, service, client) -> None:
        assert await service.get_exchange_rate("eur", "EUR") == 1.0
        client.fetch_rates.assert_not_awaited()

    async def test_convert_multiplies_by_rate(self, service) -> None:
        assert await service.convert(10, "USD", "EUR") == pytest.approx(5.0)

    async def test_unknown_target_currency_raises(self, service) -> None:
        with pytest.raises(UnsupportedCurrencyError):
            await service.get_exchange_rate("USD", "XYZ")

    async def test_fallback_cross_rate(self, service, client) -> None:
        client.fetch_rates.side_effect = ExchangeRateError("down")

        rate = await service.get_exchange_rate("EUR", "USD")

        assert rate == pytest.approx(1 / FALLBACK_USD_RATES["EUR"])


class TestSupportedCurrencies:
    """Test suite for supported_currencies()."""

    def test_returns_copies(self, service) -> None:
        currencies = service.supported_currencies()
        currencies[0]["code"] = "ZZZ"

        assert service.supported_currencies()[0]["code"] == "USD"
