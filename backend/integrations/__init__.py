"""External API integrations.

This package contains:
- Market data protocol: Common interface for live price providers
- Yahoo Finance client: Quotes from the public chart endpoint
"""

from integrations.market_data_protocol import MarketDataProvider, PriceQuote

__all__ = [
    "MarketDataProvider",
    "PriceQuote",
]
