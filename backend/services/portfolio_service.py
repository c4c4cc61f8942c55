"""Portfolio valuation against live prices."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from config import settings
from integrations.market_data_protocol import PriceQuote
from models import Investment
from schemas import InvestmentStatus

logger = logging.getLogger(__name__)


@dataclass
class InvestmentValuation:
    """A single holding valued at its resolved price."""

    investment_id: str
    investment_account_id: str
    asset_type: str
    asset_name: str
    amount: Decimal
    status: str
    description: Optional[str]
    reference: Optional[str]
    created_at: Optional[datetime]
    current_price: Decimal
    previous_close: Decimal
    current_value: Decimal
    change_percent: Decimal


@dataclass
class PortfolioValuation:
    """Per-holding valuations plus the portfolio total."""

    investment_details: list[InvestmentValuation] = field(default_factory=list)
    total_investment_value: Decimal = Decimal("0")


def change_percent(current_price: Decimal, previous_close: Decimal) -> Decimal:
    """Percent move from the previous close; 0 when there is no positive close."""
    if previous_close <= 0:
        return Decimal("0")
    return (current_price - previous_close) / previous_close * 100


class PortfolioService:
    """Values holdings against a symbol → PriceQuote map."""

    def __init__(self, include_closed: Optional[bool] = None):
        """Initialize the valuation policy.

        Args:
            include_closed: Whether closed holdings count toward
                            ``total_investment_value``. Defaults to
                            settings.INCLUDE_CLOSED_INVESTMENTS. Closed
                            holdings are always listed in the details.
        """
        self.include_closed = (
            settings.INCLUDE_CLOSED_INVESTMENTS if include_closed is None else include_closed
        )

    @staticmethod
    def distinct_asset_names(investments: Iterable[Investment]) -> list[str]:
        """Distinct asset names in first-seen order."""
        return list(dict.fromkeys(inv.asset_name for inv in investments))

    def valuate_holdings(
        self,
        investments: Iterable[Investment],
        price_map: dict[str, PriceQuote],
    ) -> PortfolioValuation:
        """Value each holding and total the portfolio.

        A holding whose asset is missing from ``price_map`` is valued at zero.

        Args:
            investments: Holdings to value, in display order.
            price_map: Quotes keyed by asset name as stored on the holding.

        Returns:
            PortfolioValuation with one entry per holding, in input order.
        """
        result = PortfolioValuation()

        for inv in investments:
            quote = price_map.get(inv.asset_name) or PriceQuote.unavailable(inv.asset_name)
            amount = Decimal(str(inv.amount))
            current_value = quote.current_price * amount

            result.investment_details.append(
                InvestmentValuation(
                    investment_id=inv.id,
                    investment_account_id=inv.investment_account_id,
                    asset_type=inv.asset_type,
                    asset_name=inv.asset_name,
                    amount=amount,
                    status=inv.status,
                    description=inv.description,
                    reference=inv.reference,
                    created_at=inv.created_at,
                    current_price=quote.current_price,
                    previous_close=quote.previous_close,
                    current_value=current_value,
                    change_percent=change_percent(quote.current_price, quote.previous_close),
                )
            )

            if self.include_closed or inv.status != InvestmentStatus.closed:
                result.total_investment_value += current_value

        logger.debug(
            "Valued %d holdings, total %s",
            len(result.investment_details), result.total_investment_value,
        )
        return result
