"""Mock implementations for external services."""

import threading
from collections import Counter
from decimal import Decimal

from integrations.exceptions import MarketDataConnectionError, MarketDataDataError, MarketDataError
from integrations.market_data_protocol import PriceQuote


class MockMarketDataProvider:
    """Mock market data provider for testing.

    Implements the MarketDataProvider protocol using an in-memory dict and
    records how often each symbol was requested (thread-safe, since
    lookups fan out across worker threads).
    """

    def __init__(
        self,
        quotes: dict[str, PriceQuote] | None = None,
        failing_symbols: set[str] | None = None,
        raising_symbols: set[str] | None = None,
    ):
        """Initialize the mock.

        Args:
            quotes: Quotes keyed by upper-cased symbol.
            failing_symbols: Symbols whose fetch raises a connection error
                             (masked to zero by ``get_quote``).
            raising_symbols: Symbols whose ``get_quote`` itself raises an
                             unexpected error, bypassing the provider's masking.
        """
        self.quotes: dict[str, PriceQuote] = dict(quotes or {})
        self.failing_symbols = {s.upper() for s in (failing_symbols or set())}
        self.raising_symbols = {s.upper() for s in (raising_symbols or set())}
        self.calls: Counter = Counter()
        self._lock = threading.Lock()

    @property
    def provider_name(self) -> str:
        return "mock"

    def set_quote(self, symbol: str, current_price, previous_close) -> None:
        """Register a quote for a symbol."""
        upper = symbol.upper()
        self.quotes[upper] = PriceQuote(
            symbol=upper,
            current_price=Decimal(str(current_price)),
            previous_close=Decimal(str(previous_close)),
        )

    def fetch_quote(self, symbol: str) -> PriceQuote:
        upper = symbol.upper()
        with self._lock:
            self.calls[upper] += 1
        if upper in self.failing_symbols:
            raise MarketDataConnectionError("Mock timeout", upper, "mock")
        if upper not in self.quotes:
            raise MarketDataDataError("Price data not found", upper, "mock")
        return self.quotes[upper]

    def get_quote(self, symbol: str) -> PriceQuote:
        if symbol.upper() in self.raising_symbols:
            with self._lock:
                self.calls[symbol.upper()] += 1
            raise RuntimeError("Mock unexpected provider failure")
        try:
            return self.fetch_quote(symbol)
        except MarketDataError:
            return PriceQuote.unavailable(symbol.upper())
