"""Dashboard API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from api.auth import get_current_user_id
from api.market_data import get_market_data_service
from database import get_db
from schemas import AccountBalance, DashboardSummaryResponse, InvestmentDetail, RecentTransaction
from services.balance_service import AccountSummary
from services.dashboard_service import DashboardService
from services.market_data_service import MarketDataService
from services.portfolio_service import InvestmentValuation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _account_balance(summary: AccountSummary) -> AccountBalance:
    return AccountBalance(
        id=summary.account_id,
        name=summary.name,
        type=summary.type,
        currency=summary.currency,
        balance=summary.balance,
        recent_credits=summary.recent_credits,
        recent_debits=summary.recent_debits,
        net_worth_impact=summary.net_worth_impact,
    )


def _investment_detail(valuation: InvestmentValuation) -> InvestmentDetail:
    return InvestmentDetail(
        id=valuation.investment_id,
        investment_account_id=valuation.investment_account_id,
        asset_type=valuation.asset_type,
        asset_name=valuation.asset_name,
        amount=valuation.amount,
        description=valuation.description,
        reference=valuation.reference,
        status=valuation.status,
        created_at=valuation.created_at,
        current_price=valuation.current_price,
        previous_close=valuation.previous_close,
        current_value=valuation.current_value,
        change_percent=valuation.change_percent,
    )


@router.get("/summary", response_model=DashboardSummaryResponse)
def get_dashboard_summary(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    market_data_service: MarketDataService = Depends(get_market_data_service),
):
    """Get net worth, balances, investment values, movers and recent activity.

    Unavailable prices show up as zero-valued holdings; any other failure
    is reported as a generic 500.
    """
    try:
        summary = DashboardService(market_data_service=market_data_service).build_summary(
            db, user_id
        )
    except Exception:
        logger.exception("Error building dashboard summary for user %s", user_id)
        raise HTTPException(status_code=500, detail="Something went wrong")

    movers = summary.movers
    return DashboardSummaryResponse(
        total_bank_balance=summary.total_bank_balance,
        total_investment_value=summary.total_investment_value,
        account_balances=[_account_balance(s) for s in summary.account_balances],
        recent_transactions=[
            RecentTransaction(
                id=t.id,
                account_id=t.account_id,
                account_name=t.account.name if t.account else None,
                amount=t.amount,
                type=t.type,
                description=t.description,
                category=t.category,
                reference=t.reference,
                status=t.status,
                created_at=t.created_at,
            )
            for t in summary.recent_transactions
        ],
        investment_details=[_investment_detail(v) for v in summary.investment_details],
        top_gainer=_investment_detail(movers.top_gainer) if movers.top_gainer else None,
        top_loser=_investment_detail(movers.top_loser) if movers.top_loser else None,
        top_account_gainer=(
            _account_balance(movers.top_account_gainer) if movers.top_account_gainer else None
        ),
        top_account_loser=(
            _account_balance(movers.top_account_loser) if movers.top_account_loser else None
        ),
    )
