"""Market data provider protocol definitions.

Defines the interface for live price lookups used by the dashboard
summary and the single-symbol price endpoint.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol


@dataclass
class PriceQuote:
    """Current and previous-close price for a symbol.

    Ephemeral: fetched fresh per request and never persisted. A zero quote
    stands for "price unavailable".
    """

    symbol: str
    current_price: Decimal
    previous_close: Decimal

    @classmethod
    def unavailable(cls, symbol: str) -> "PriceQuote":
        """Return the zero quote used when a price cannot be fetched."""
        return cls(symbol=symbol, current_price=Decimal("0"), previous_close=Decimal("0"))


class MarketDataProvider(Protocol):
    """Protocol for market data providers.

    Implementations fetch quotes from external sources.
    """

    @property
    def provider_name(self) -> str:
        """Return the provider name (e.g., 'yahoo')."""
        ...

    def fetch_quote(self, symbol: str) -> PriceQuote:
        """Fetch the current quote for a symbol.

        Raises:
            MarketDataError: If the upstream call fails or returns no price.
        """
        ...

    def get_quote(self, symbol: str) -> PriceQuote:
        """Fetch the current quote, masking any failure to a zero quote."""
        ...
