"""Unit tests for PortfolioService."""

from decimal import Decimal

from integrations.market_data_protocol import PriceQuote
from models import Investment
from services.portfolio_service import PortfolioService, change_percent


def _investment(asset_name: str, amount: str, status: str = "active", inv_id: str | None = None):
    return Investment(
        id=inv_id or f"inv-{asset_name}-{amount}",
        user_id="user-1",
        investment_account_id="ia-1",
        asset_type="Crypto",
        asset_name=asset_name,
        amount=Decimal(amount),
        status=status,
    )


def _quote(symbol: str, current: str, previous: str) -> PriceQuote:
    return PriceQuote(symbol=symbol, current_price=Decimal(current), previous_close=Decimal(previous))


class TestChangePercent:
    """Tests for change_percent()."""

    def test_gain(self):
        assert change_percent(Decimal("100"), Decimal("50")) == Decimal("100")

    def test_loss(self):
        assert change_percent(Decimal("90"), Decimal("100")) == Decimal("-10")

    def test_zero_previous_close(self):
        assert change_percent(Decimal("100"), Decimal("0")) == Decimal("0")

    def test_negative_previous_close(self):
        assert change_percent(Decimal("100"), Decimal("-5")) == Decimal("0")


class TestValuateHoldings:
    """Tests for PortfolioService.valuate_holdings()."""

    def test_values_each_holding(self):
        """Two holdings of the same asset share one quote."""
        investments = [_investment("BTC", "1"), _investment("BTC", "2")]
        price_map = {"BTC": _quote("BTC", "100", "50")}

        result = PortfolioService(include_closed=True).valuate_holdings(investments, price_map)

        assert [d.current_value for d in result.investment_details] == [Decimal("100"), Decimal("200")]
        assert all(d.change_percent == Decimal("100") for d in result.investment_details)
        assert result.total_investment_value == Decimal("300")

    def test_missing_price_values_at_zero(self):
        """A holding without a quote is valued at zero instead of failing."""
        investments = [_investment("AAPL", "3"), _investment("XYZ", "10")]
        price_map = {"AAPL": _quote("AAPL", "10", "10")}

        result = PortfolioService().valuate_holdings(investments, price_map)

        xyz = result.investment_details[1]
        assert xyz.current_price == Decimal("0")
        assert xyz.current_value == Decimal("0")
        assert xyz.change_percent == Decimal("0")
        assert result.total_investment_value == Decimal("30")

    def test_closed_holdings_counted_when_included(self):
        investments = [_investment("AAPL", "1"), _investment("AAPL", "2", status="closed")]
        price_map = {"AAPL": _quote("AAPL", "10", "10")}

        result = PortfolioService(include_closed=True).valuate_holdings(investments, price_map)

        assert result.total_investment_value == Decimal("30")

    def test_closed_holdings_excluded_from_total(self):
        """Excluded closed holdings are still listed in the details."""
        investments = [_investment("AAPL", "1"), _investment("AAPL", "2", status="closed")]
        price_map = {"AAPL": _quote("AAPL", "10", "10")}

        result = PortfolioService(include_closed=False).valuate_holdings(investments, price_map)

        assert result.total_investment_value == Decimal("10")
        assert len(result.investment_details) == 2

    def test_preserves_input_order(self):
        investments = [_investment("ETH", "1"), _investment("AAPL", "1")]
        price_map = {"AAPL": _quote("AAPL", "1", "1"), "ETH": _quote("ETH", "1", "1")}

        result = PortfolioService().valuate_holdings(investments, price_map)

        assert [d.asset_name for d in result.investment_details] == ["ETH", "AAPL"]

    def test_empty(self):
        result = PortfolioService().valuate_holdings([], {})
        assert result.investment_details == []
        assert result.total_investment_value == Decimal("0")


class TestDistinctAssetNames:
    """Tests for distinct_asset_names()."""

    def test_first_seen_order(self):
        investments = [_investment("BTC", "1"), _investment("AAPL", "1"), _investment("BTC", "2")]
        assert PortfolioService.distinct_asset_names(investments) == ["BTC", "AAPL"]

    def test_spelling_is_preserved(self):
        """Different spellings are separate entries; normalization happens at fetch time."""
        investments = [_investment("btc", "1"), _investment("BTC", "1")]
        assert PortfolioService.distinct_asset_names(investments) == ["btc", "BTC"]
