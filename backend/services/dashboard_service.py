"""Dashboard summary aggregation."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from config import settings
from models import Account, Investment, Transaction
from services.balance_service import AccountSummary, BalanceService
from services.market_data_service import MarketDataService
from services.mover_service import Movers, rank_movers
from services.portfolio_service import InvestmentValuation, PortfolioService
from services.transaction_service import TransactionService

logger = logging.getLogger(__name__)


@dataclass
class DashboardSummary:
    """Everything the dashboard shows for one user."""

    total_bank_balance: Decimal
    total_investment_value: Decimal
    account_balances: list[AccountSummary] = field(default_factory=list)
    investment_details: list[InvestmentValuation] = field(default_factory=list)
    recent_transactions: list[Transaction] = field(default_factory=list)
    movers: Movers = field(default_factory=Movers)


class DashboardService:
    """Builds the consolidated dashboard summary for a user.

    Every storage read is scoped by the ``user_id`` passed in. Price
    failures degrade single holdings to zero; any other error propagates
    to the caller.
    """

    def __init__(
        self,
        market_data_service: Optional[MarketDataService] = None,
        balance_service: Optional[BalanceService] = None,
        portfolio_service: Optional[PortfolioService] = None,
    ):
        self.market_data_service = market_data_service or MarketDataService()
        self.balance_service = balance_service or BalanceService()
        self.portfolio_service = portfolio_service or PortfolioService()

    def build_summary(
        self, db: Session, user_id: str, now: Optional[datetime] = None
    ) -> DashboardSummary:
        """Aggregate balances, valuations, movers and recent activity.

        Args:
            db: Database session
            user_id: Owner whose data is summarized
            now: Reference time for the recent-activity window (defaults to now)

        Returns:
            DashboardSummary
        """
        # 1. Raw data, all scoped to the user
        accounts = (
            db.query(Account)
            .filter(Account.user_id == user_id)
            .order_by(Account.created_at.asc())
            .all()
        )
        transactions = TransactionService.list_all(db, user_id)
        investments = (
            db.query(Investment)
            .filter(Investment.user_id == user_id)
            .order_by(Investment.created_at.asc())
            .all()
        )

        # 2. Bank balances
        account_balances = self.balance_service.summarize_accounts(
            accounts, transactions, now=now
        )
        total_bank_balance = BalanceService.total_bank_balance(account_balances)

        # 3. One price lookup per distinct asset
        asset_names = PortfolioService.distinct_asset_names(investments)
        price_map = self.market_data_service.resolve_prices(asset_names)

        # 4. Holdings at current prices
        valuation = self.portfolio_service.valuate_holdings(investments, price_map)

        # 5. Movers
        movers = rank_movers(account_balances, valuation.investment_details)

        # 6. Recent activity is a direct read, independent of step 1
        recent = TransactionService.list_recent(
            db, user_id, limit=settings.RECENT_TRANSACTIONS_LIMIT
        )

        logger.info(
            "Dashboard summary for user %s: %d accounts, %d holdings (%d symbols)",
            user_id, len(accounts), len(investments), len(asset_names),
        )

        return DashboardSummary(
            total_bank_balance=total_bank_balance,
            total_investment_value=valuation.total_investment_value,
            account_balances=account_balances,
            investment_details=valuation.investment_details,
            recent_transactions=recent,
            movers=movers,
        )
