"""
Currency schemas.

Dependencies: pydantic
System role: Currency API contracts
"""

from pydantic import BaseModel


class CurrencyInfo(BaseModel):
    """Supported currency."""

    code: str
    name: str
    symbol: str


class ExchangeRatesResponse(BaseModel):
    """Rates for one unit of the base currency."""

    base: str
    rates: dict[str, float]


class ConversionResponse(BaseModel):
    """Result of converting an amount between currencies."""

    amount: float
    from_currency: str
    to_currency: str
    rate: float
    converted_amount: float
