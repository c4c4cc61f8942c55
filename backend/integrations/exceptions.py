"""Typed exception hierarchy for market data errors.

Provides structured exceptions for differentiated error handling
(network errors vs upstream HTTP errors vs missing data).
"""


class MarketDataError(Exception):
    """Base exception for all market-data errors.

    Carries the symbol and provider name so callers can identify what failed.
    """

    def __init__(self, message: str, symbol: str = "", provider_name: str = ""):
        self.symbol = symbol
        self.provider_name = provider_name
        super().__init__(message)


class MarketDataConnectionError(MarketDataError):
    """Network failures: timeouts, DNS resolution, connection refused."""

    pass


class MarketDataAPIError(MarketDataError):
    """HTTP 4xx/5xx responses from the provider API."""

    def __init__(
        self,
        message: str,
        symbol: str = "",
        provider_name: str = "",
        status_code: int | None = None,
    ):
        self.status_code = status_code
        super().__init__(message, symbol, provider_name)


class MarketDataDataError(MarketDataError):
    """Malformed response, or a response with no price for the symbol."""

    pass
