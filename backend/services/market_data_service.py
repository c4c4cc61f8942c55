"""Market data service: resolves live prices for a set of symbols."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from config import settings
from integrations.market_data_protocol import MarketDataProvider, PriceQuote

logger = logging.getLogger(__name__)


class MarketDataService:
    """Orchestrates price lookups via a pluggable provider.

    Symbols are deduplicated before any external call, then fetched
    concurrently (one call per distinct symbol). Each lookup fails in
    isolation: a symbol whose fetch raises gets a zero quote and the
    others are unaffected.
    """

    def __init__(
        self,
        provider: Optional[MarketDataProvider] = None,
        max_workers: Optional[int] = None,
    ):
        """Initialize with an optional provider for dependency injection.

        Args:
            provider: Market data provider. If None, a YahooFinanceClient
                     is created on first use.
            max_workers: Cap on concurrent lookups. Defaults to
                        settings.PRICE_LOOKUP_MAX_WORKERS.
        """
        self._provider = provider
        self._owns_provider = provider is None
        self._max_workers = max_workers or settings.PRICE_LOOKUP_MAX_WORKERS

    @property
    def provider(self) -> MarketDataProvider:
        """Get the market data provider, creating if not provided."""
        if self._provider is None:
            from integrations.yahoo_finance_client import YahooFinanceClient

            self._provider = YahooFinanceClient()
        return self._provider

    def close(self) -> None:
        """Release the provider's HTTP resources if this service created it.

        Injected providers belong to the caller and are left open.
        """
        if self._owns_provider and self._provider is not None:
            self._provider.close()
            self._provider = None

    def get_quote(self, symbol: str) -> PriceQuote:
        """Fetch one symbol's quote, raising on failure.

        Used by the single-symbol price endpoint, which reports upstream
        failures to the caller instead of masking them.
        """
        return self.provider.fetch_quote(symbol.upper())

    def resolve_prices(self, symbols: Iterable[str]) -> dict[str, PriceQuote]:
        """Resolve every distinct symbol to a quote.

        Args:
            symbols: Symbols as stored on holdings. Duplicates are collapsed
                     before fetching; the returned map is keyed by the
                     spellings as given (not normalized) so each holding can
                     look itself up directly.

        Returns:
            Dict mapping each distinct input symbol to its PriceQuote. Failed
            lookups map to a zero quote.
        """
        distinct = list(dict.fromkeys(symbols))
        if not distinct:
            return {}

        workers = min(self._max_workers, len(distinct))
        logger.info(
            "Resolving prices for %d distinct symbols (%d workers)",
            len(distinct), workers,
        )

        result: dict[str, PriceQuote] = {}
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                symbol: executor.submit(self.provider.get_quote, symbol)
                for symbol in distinct
            }
            for symbol, future in futures.items():
                try:
                    result[symbol] = future.result()
                except Exception:
                    logger.warning(
                        "Price lookup failed for %s", symbol, exc_info=True
                    )
                    result[symbol] = PriceQuote.unavailable(symbol.upper())

        return result
