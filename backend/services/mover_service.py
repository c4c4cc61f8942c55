"""Top gainer/loser selection for the dashboard."""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TypeVar

from services.balance_service import AccountSummary
from services.portfolio_service import InvestmentValuation

T = TypeVar("T")


@dataclass
class Movers:
    """Dashboard highlights. Any field may be None."""

    top_account_gainer: Optional[AccountSummary] = None
    top_account_loser: Optional[AccountSummary] = None
    top_gainer: Optional[InvestmentValuation] = None
    top_loser: Optional[InvestmentValuation] = None


def _first_max(items: Sequence[T], key: Callable[[T], object]) -> Optional[T]:
    """Item with the largest key; the earliest item wins ties."""
    best = None
    for item in items:
        if best is None or key(item) > key(best):
            best = item
    return best


def _first_min(items: Sequence[T], key: Callable[[T], object]) -> Optional[T]:
    """Item with the smallest key; the earliest item wins ties."""
    best = None
    for item in items:
        if best is None or key(item) < key(best):
            best = item
    return best


def rank_movers(
    account_summaries: Sequence[AccountSummary],
    investment_details: Sequence[InvestmentValuation],
) -> Movers:
    """Pick the top gaining/losing account and holding.

    - account gainer: most recent credits, only if above zero
    - account loser: most recent debits, only if above zero
    - holding gainer: highest change percent, only if positive
    - holding loser: lowest change percent, only if negative
    """
    movers = Movers()

    gainer = _first_max(account_summaries, lambda s: s.recent_credits)
    if gainer is not None and gainer.recent_credits > 0:
        movers.top_account_gainer = gainer

    loser = _first_max(account_summaries, lambda s: s.recent_debits)
    if loser is not None and loser.recent_debits > 0:
        movers.top_account_loser = loser

    top = _first_max(investment_details, lambda d: d.change_percent)
    if top is not None and top.change_percent > 0:
        movers.top_gainer = top

    bottom = _first_min(investment_details, lambda d: d.change_percent)
    if bottom is not None and bottom.change_percent < 0:
        movers.top_loser = bottom

    return movers
