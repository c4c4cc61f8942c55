"""Tests for the market data exception hierarchy."""

from integrations.exceptions import (
    MarketDataAPIError,
    MarketDataConnectionError,
    MarketDataDataError,
    MarketDataError,
)


class TestExceptionHierarchy:
    """Every specific error is catchable as MarketDataError."""

    def test_connection_error_is_market_data_error(self):
        assert issubclass(MarketDataConnectionError, MarketDataError)

    def test_api_error_is_market_data_error(self):
        assert issubclass(MarketDataAPIError, MarketDataError)

    def test_data_error_is_market_data_error(self):
        assert issubclass(MarketDataDataError, MarketDataError)


class TestExceptionAttributes:
    def test_base_carries_symbol_and_provider(self):
        err = MarketDataError("boom", symbol="AAPL", provider_name="yahoo")
        assert str(err) == "boom"
        assert err.symbol == "AAPL"
        assert err.provider_name == "yahoo"

    def test_defaults(self):
        err = MarketDataDataError("no price")
        assert err.symbol == ""
        assert err.provider_name == ""

    def test_api_error_status_code(self):
        err = MarketDataAPIError("bad", "BTC", "yahoo", status_code=429)
        assert err.status_code == 429
        assert err.symbol == "BTC"

    def test_api_error_status_code_optional(self):
        assert MarketDataAPIError("bad").status_code is None
