"""
Currency API endpoints.

Routes:
- GET /currencies - Supported currencies
- GET /currencies/rates?base= - Exchange rates for a base currency
- GET /currencies/convert?amount=&from=&to= - Convert an amount

Dependencies: tutorschool.application.services
System role: Currency HTTP API
"""

from fastapi import APIRouter, Depends, Query

from tutorschool.api.deps.dependencies import get_currency_service
from tutorschool.api.routers.router_utils import handle_service_errors
from tutorschool.application.services.currency_service import CurrencyService
from tutorschool.models.currency import ConversionResponse, CurrencyInfo, ExchangeRatesResponse

router = APIRouter(prefix="/currencies", tags=["currencies"])


@router.get("", response_model=list[CurrencyInfo])
async def list_currencies(
    service: CurrencyService = Depends(get_currency_service),
) -> list[CurrencyInfo]:
    return [CurrencyInfo(**c) for c in service.supported_currencies()]


@router.get("/rates", response_model=ExchangeRatesResponse)
@handle_service_errors
async def get_rates(
    base: str = Query("USD", min_length=3, max_length=3),
    service: CurrencyService = Depends(get_currency_service),
) -> ExchangeRatesResponse:
    """Exchange rates for one unit of the base currency."""
    rates = await service.get_exchange_rates(base)
    return ExchangeRatesResponse(base=base.upper(), rates=rates)


@router.get("/convert", response_model=ConversionResponse)
@handle_service_errors
async def convert(
    amount: float = Query(..., ge=0),
    from_currency: str = Query(..., alias="from", min_length=3, max_length=3),
    to_currency: str = Query(..., alias="to", min_length=3, max_length=3),
    service: CurrencyService = Depends(get_currency_service),
) -> ConversionResponse:
    """
    Convert an amount between currencies.

    Raises:
        HTTPException(400): Unsupported target currency
    """
    rate = await service.get_exchange_rate(from_currency, to_currency)
    return ConversionResponse(
        amount=amount,
        from_currency=from_currency.upper(),
        to_currency=to_currency.upper(),
        rate=rate,
        converted_amount=amount * rate,
    )
