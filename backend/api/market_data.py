"""Market data API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.auth import get_current_user_id
from integrations.exceptions import MarketDataDataError, MarketDataError
from schemas import PriceResponse
from services.market_data_service import MarketDataService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/investments", tags=["market-data"])


def get_market_data_service():
    """Dependency that provides a MarketDataService (overridden in tests).

    The service's HTTP client is closed once the request is done.
    """
    service = MarketDataService()
    try:
        yield service
    finally:
        service.close()


@router.get("/price", response_model=PriceResponse)
def get_price(
    asset_name: str = Query(..., alias="assetName", min_length=1, description="Ticker or crypto symbol"),
    user_id: str = Depends(get_current_user_id),
    service: MarketDataService = Depends(get_market_data_service),
):
    """Fetch the current and previous-close price for one asset.

    Unlike the dashboard summary, failures here are reported: no price data
    is a 404 and any other upstream failure is a 502.
    """
    try:
        quote = service.get_quote(asset_name)
    except MarketDataDataError:
        raise HTTPException(status_code=404, detail="Price data not found for the given asset")
    except MarketDataError as e:
        logger.warning("Price lookup failed for %s: %s", asset_name, e)
        raise HTTPException(status_code=502, detail="Failed to fetch price data")

    return PriceResponse(
        symbol=quote.symbol,
        current_price=quote.current_price,
        previous_close=quote.previous_close,
    )
