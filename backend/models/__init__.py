"""SQLAlchemy ORM models."""

from .account import Account
from .investment import Investment
from .investment_account import InvestmentAccount
from .transaction import Transaction
from .user import User
from .utils import generate_uuid

__all__ = ["Account", "Investment", "InvestmentAccount", "Transaction", "User", "generate_uuid"]
