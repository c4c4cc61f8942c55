"""Yahoo Finance market data provider implementation."""

import logging
from decimal import Decimal
from typing import Any, Optional

import httpx

from config import settings
from integrations.exceptions import (
    MarketDataAPIError,
    MarketDataConnectionError,
    MarketDataDataError,
    MarketDataError,
)
from integrations.market_data_protocol import PriceQuote

logger = logging.getLogger(__name__)

# Crypto tickers Yahoo lists as "<SYMBOL>-USD" pairs.
CRYPTO_SYMBOLS: frozenset[str] = frozenset({
    "BTC", "ETH", "BNB", "XRP", "ADA", "SOL", "DOGE", "DOT", "MATIC", "AVAX",
    "TRX", "LTC", "SHIB", "UNI", "ATOM", "XLM", "ETC", "FIL", "ICP", "NEAR",
})


def is_crypto_symbol(symbol: str) -> bool:
    """Return True if the symbol is on the known crypto allow-list."""
    return symbol.upper() in CRYPTO_SYMBOLS


def to_yahoo_ticker(symbol: str) -> str:
    """Map a holding's asset name to the ticker Yahoo's chart endpoint expects.

    Crypto symbols are quoted against USD (``BTC`` -> ``BTC-USD``); anything
    else is queried as-is, upper-cased.
    """
    upper = symbol.upper()
    return f"{upper}-USD" if upper in CRYPTO_SYMBOLS else upper


def _to_decimal(value: Any) -> Optional[Decimal]:
    """Convert a JSON number to a Decimal, or None if it is not numeric.

    No rounding: sub-cent crypto quotes keep every significant digit.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return Decimal(str(value))


class YahooFinanceClient:
    """Market data provider using Yahoo Finance's public chart endpoint.

    One GET per symbol. The upstream rejects non-browser clients, so every
    request carries a browser-like User-Agent. No retry and no caching.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the HTTP client.

        Args:
            base_url: Chart endpoint base. Defaults to settings.MARKET_DATA_BASE_URL.
            timeout: Per-request timeout in seconds. Defaults to
                     settings.MARKET_DATA_TIMEOUT_SECONDS.
            user_agent: User-Agent header. Defaults to settings.MARKET_DATA_USER_AGENT.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
        """
        self._client = httpx.Client(
            base_url=base_url or settings.MARKET_DATA_BASE_URL,
            headers={"User-Agent": user_agent or settings.MARKET_DATA_USER_AGENT},
            timeout=timeout or settings.MARKET_DATA_TIMEOUT_SECONDS,
            transport=transport,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    @property
    def provider_name(self) -> str:
        return "yahoo"

    def fetch_quote(self, symbol: str) -> PriceQuote:
        """Fetch the current and previous-close price for a symbol.

        Reads ``chart.result[0].meta.regularMarketPrice`` and
        ``chartPreviousClose`` (falling back to ``previousClose``).

        Args:
            symbol: Ticker or crypto symbol (case-insensitive).

        Returns:
            PriceQuote keyed by the upper-cased symbol.

        Raises:
            MarketDataConnectionError: Timeout or network failure.
            MarketDataAPIError: Non-success HTTP status.
            MarketDataDataError: Non-JSON body or missing price fields.
        """
        upper = symbol.upper()
        ticker = to_yahoo_ticker(upper)

        try:
            response = self._client.get(f"/{ticker}")
        except (httpx.TimeoutException, httpx.TransportError) as exc:
            raise MarketDataConnectionError(
                f"Request for {ticker} failed: {exc}", upper, self.provider_name
            ) from exc

        if not response.is_success:
            raise MarketDataAPIError(
                f"Yahoo Finance returned HTTP {response.status_code} for {ticker}",
                upper,
                self.provider_name,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise MarketDataDataError(
                f"Non-JSON response for {ticker}", upper, self.provider_name
            ) from exc

        meta = self._extract_meta(data)
        current_price = _to_decimal(meta.get("regularMarketPrice"))
        previous_close = _to_decimal(meta.get("chartPreviousClose"))
        if previous_close is None:
            previous_close = _to_decimal(meta.get("previousClose"))
        if current_price is None or previous_close is None:
            raise MarketDataDataError(
                f"Price data not found for {ticker}", upper, self.provider_name
            )

        return PriceQuote(
            symbol=upper,
            current_price=current_price,
            previous_close=previous_close,
        )

    def get_quote(self, symbol: str) -> PriceQuote:
        """Fetch a quote, returning a zero quote on any market-data failure.

        Price unavailability must never abort a caller that is aggregating
        many symbols.
        """
        try:
            return self.fetch_quote(symbol)
        except MarketDataError:
            logger.warning(
                "Yahoo Finance: price unavailable for %s", symbol, exc_info=True
            )
            return PriceQuote.unavailable(symbol.upper())

    @staticmethod
    def _extract_meta(data: Any) -> dict:
        """Return ``chart.result[0].meta`` or an empty dict when absent."""
        if not isinstance(data, dict):
            return {}
        chart = data.get("chart") or {}
        results = chart.get("result") if isinstance(chart, dict) else None
        if not results or not isinstance(results, list):
            return {}
        meta = results[0].get("meta") if isinstance(results[0], dict) else None
        return meta if isinstance(meta, dict) else {}
