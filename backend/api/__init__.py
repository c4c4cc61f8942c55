"""API route handlers."""
from . import accounts, auth, dashboard, investments, market_data, transactions

__all__ = ["accounts", "auth", "dashboard", "investments", "market_data", "transactions"]
