"""Balance calculation for bank accounts.

Balances are never stored. They are derived from an account's transactions
using the account type's sign convention:

- debit account (asset, e.g. checking): credits add, debits subtract
- credit account (liability, e.g. credit card): debits add to the owed
  balance, credits (payments) subtract

A credit account's balance is debt, so its contribution to net worth is
the negated balance.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from config import settings
from models import Account, Transaction
from schemas import AccountType, TransactionType
from utils.timestamps import as_utc, utc_now

logger = logging.getLogger(__name__)


@dataclass
class AccountSummary:
    """Derived balance figures for one account."""

    account_id: str
    name: str
    type: str
    currency: Optional[str]
    balance: Decimal
    recent_credits: Decimal
    recent_debits: Decimal
    net_worth_impact: Decimal


def signed_amount(account_type: str, transaction_type: str, amount: Decimal) -> Decimal:
    """Return a transaction's contribution to its account's balance."""
    if account_type == AccountType.debit:
        increases = transaction_type == TransactionType.credit
    else:
        increases = transaction_type == TransactionType.debit
    return amount if increases else -amount


class BalanceService:
    """Computes account balances and trailing-window activity."""

    def __init__(self, window_hours: Optional[int] = None):
        """Initialize with the trailing activity window.

        Args:
            window_hours: Length of the recent-activity window. Defaults to
                          settings.RECENT_ACTIVITY_HOURS.
        """
        if window_hours is None:
            window_hours = settings.RECENT_ACTIVITY_HOURS
        self.window = timedelta(hours=window_hours)

    def compute_account_summary(
        self,
        account: Account,
        transactions: Iterable[Transaction],
        now: Optional[datetime] = None,
    ) -> AccountSummary:
        """Compute balance, recent credits/debits and net-worth impact.

        Transactions belonging to other accounts are ignored, so the caller
        may pass a user's full transaction list. Status is not filtered:
        pending and rejected transactions count toward the balance.

        Args:
            account: The account being summarized.
            transactions: Candidate transactions (any account).
            now: Reference time for the recent window. Defaults to now (UTC).

        Returns:
            AccountSummary for the account.
        """
        window_start = as_utc(now or utc_now()) - self.window

        balance = Decimal("0")
        recent_credits = Decimal("0")
        recent_debits = Decimal("0")

        for txn in transactions:
            if txn.account_id != account.id:
                continue
            amount = Decimal(str(txn.amount))
            balance += signed_amount(account.type, txn.type, amount)

            # Window is exclusive at its start; split by the transaction's own type
            if txn.created_at is not None and as_utc(txn.created_at) > window_start:
                if txn.type == TransactionType.credit:
                    recent_credits += amount
                elif txn.type == TransactionType.debit:
                    recent_debits += amount

        net_worth_impact = -balance if account.type == AccountType.credit else balance

        return AccountSummary(
            account_id=account.id,
            name=account.name,
            type=account.type,
            currency=account.currency,
            balance=balance,
            recent_credits=recent_credits,
            recent_debits=recent_debits,
            net_worth_impact=net_worth_impact,
        )

    def summarize_accounts(
        self,
        accounts: Iterable[Account],
        transactions: Iterable[Transaction],
        now: Optional[datetime] = None,
    ) -> list[AccountSummary]:
        """Summarize every account, preserving input order."""
        now = now or utc_now()
        # Group once so each account scans only its own transactions
        by_account: dict[str, list[Transaction]] = {}
        for txn in transactions:
            by_account.setdefault(txn.account_id, []).append(txn)

        return [
            self.compute_account_summary(account, by_account.get(account.id, []), now=now)
            for account in accounts
        ]

    @staticmethod
    def total_bank_balance(summaries: Iterable[AccountSummary]) -> Decimal:
        """Sum of net-worth impacts across accounts."""
        return sum((s.net_worth_impact for s in summaries), Decimal("0"))
