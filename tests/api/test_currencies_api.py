from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from tutorschool.api.deps.dependencies import get_currency_service
from tutorschool.api.main import create_app
from tutorschool.application.services.currency_service import CurrencyService
from tutorschool.core.exceptions import ExchangeRateError, UnsupportedCurrencyError


@pytest.fixture
def mock_currency_service():
    service = MagicMock(spec=CurrencyService)
    service.get_exchange_rates = AsyncMock(return_value={"USD": 1.0, "EUR": 0.5})
    service.get_exchange_rate = AsyncMock(return_value=0.5)
    service.supported_currencies.return_value = [{"code": "USD", "name": "US Dollar", "symbol": "$"}]
    return service


@pytest.fixture
def client(mock_currency_service):
    test_client = TestClient(create_app())
    test_client.app.dependency_overrides[get_currency_service] = lambda: mock_currency_service
    return test_client


def test_list_currencies(client):
    response = client.get("/api/v1/currencies")

    assert response.status_code == 200
    assert response.json() == [{"code": "USD", "name": "US Dollar", "symbol": "$"}]


def test_get_rates(client, mock_currency_service):
    response = client.get("/api/v1/currencies/rates", params={"base": "usd"})

    assert response.status_code == 200
    assert response.json() == {"base": "USD", "rates": {"USD": 1.0, "EUR": 0.5}}
    mock_currency_service.get_exchange_rates.assert_awaited_once_with("usd")


def test_convert(client):
    response = client.get("/api/v1/currencies/convert", params={"amount": 10, "from": "usd", "to": "eur"})

    assert response.status_code == 200
    assert response.json() == {
        "amount": 10.0,
        "from_currency": "USD",
        "to_currency": "EUR",
        "rate": 0.5,
        "converted_amount": 5.0,
    }


def test_convert_unsupported_currency_returns_400(client, mock_currency_service):
    mock_currency_service.get_exchange_rate.side_effect = UnsupportedCurrencyError("XYZ")

    response = client.get("/api/v1/currencies/convert", params={"amount": 1, "from": "USD", "to": "XYZ"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Unsupported currency: XYZ"


def test_rates_provider_error_returns_503(client, mock_currency_service):
    mock_currency_service.get_exchange_rates.side_effect = ExchangeRateError("down")

    response = client.get("/api/v1/currencies/rates")

    assert response.status_code == 503


def test_convert_rejects_negative_amount(client):
    response = client.get("/api/v1/currencies/convert", params={"amount": -1, "from": "USD", "to": "EUR"})

    assert response.status_code == 422
