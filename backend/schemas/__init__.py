"""Pydantic schemas for API request/response validation."""

from .account import AccountCreate, AccountResponse, AccountType, AccountUpdate
from .auth import LoginResponse, UserLogin, UserRegister, UserResponse
from .base import CamelModel
from .dashboard import AccountBalance, DashboardSummaryResponse, InvestmentDetail, RecentTransaction
from .investment import (
    AssetType,
    InvestmentAccountCreate,
    InvestmentAccountResponse,
    InvestmentAccountUpdate,
    InvestmentCreate,
    InvestmentResponse,
    InvestmentStatus,
    InvestmentUpdate,
    PriceResponse,
)
from .transaction import (
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
    TransactionStatus,
    TransactionStatusUpdate,
    TransactionType,
)

__all__ = [
    "AccountBalance",
    "AccountCreate",
    "AccountResponse",
    "AccountType",
    "AccountUpdate",
    "AssetType",
    "CamelModel",
    "DashboardSummaryResponse",
    "InvestmentAccountCreate",
    "InvestmentAccountResponse",
    "InvestmentAccountUpdate",
    "InvestmentCreate",
    "InvestmentDetail",
    "InvestmentResponse",
    "InvestmentStatus",
    "InvestmentUpdate",
    "LoginResponse",
    "PriceResponse",
    "RecentTransaction",
    "TransactionCreate",
    "TransactionListResponse",
    "TransactionResponse",
    "TransactionStatus",
    "TransactionStatusUpdate",
    "TransactionType",
    "UserLogin",
    "UserRegister",
    "UserResponse",
]
