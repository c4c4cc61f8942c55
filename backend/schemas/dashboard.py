"""Pydantic schemas for the dashboard summary."""

from datetime import datetime
from typing import Optional

from schemas.base import CamelModel


class AccountBalance(CamelModel):
    """Derived balance and 24h activity for one bank account."""

    id: str
    name: str
    type: str
    currency: Optional[str] = None
    balance: float
    recent_credits: float
    recent_debits: float
    net_worth_impact: float


class InvestmentDetail(CamelModel):
    """A holding valued at the current market price."""

    id: str
    investment_account_id: str
    asset_type: str
    asset_name: str
    amount: float
    description: Optional[str] = None
    reference: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    current_price: float
    previous_close: float
    current_value: float
    change_percent: float


class RecentTransaction(CamelModel):
    """A recent transaction with its account name attached."""

    id: str
    account_id: str
    account_name: Optional[str] = None
    amount: float
    type: str
    description: Optional[str] = None
    category: Optional[str] = None
    reference: Optional[str] = None
    status: str
    created_at: datetime


class DashboardSummaryResponse(CamelModel):
    """Consolidated dashboard summary. Absent movers are null, never omitted."""

    total_bank_balance: float
    total_investment_value: float
    account_balances: list[AccountBalance]
    recent_transactions: list[RecentTransaction]
    investment_details: list[InvestmentDetail]
    top_gainer: Optional[InvestmentDetail] = None
    top_loser: Optional[InvestmentDetail] = None
    top_account_gainer: Optional[AccountBalance] = None
    top_account_loser: Optional[AccountBalance] = None
