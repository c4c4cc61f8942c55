"""Pydantic schemas for investment accounts, investments and prices."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from schemas.base import CamelModel


class AssetType(str, Enum):
    """Kinds of assets a holding can track."""

    stock = "Stock"
    bond = "Bond"
    crypto = "Crypto"


class InvestmentStatus(str, Enum):
    """Holding lifecycle. Closed holdings are immutable."""

    active = "active"
    closed = "closed"


class InvestmentAccountCreate(CamelModel):
    """Schema for creating an InvestmentAccount."""

    name: str = Field(min_length=1)
    description: Optional[str] = None
    currency: Optional[str] = None


class InvestmentAccountUpdate(CamelModel):
    """Schema for updating an InvestmentAccount."""

    description: Optional[str] = None


class InvestmentAccountResponse(CamelModel):
    """Schema for InvestmentAccount API response."""

    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    currency: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class InvestmentCreate(CamelModel):
    """Schema for creating an Investment."""

    investment_account_id: str
    amount: Decimal = Field(gt=0)
    asset_type: AssetType
    asset_name: str = Field(min_length=1)
    description: Optional[str] = None
    reference: Optional[str] = None
    status: InvestmentStatus = InvestmentStatus.active


class InvestmentUpdate(CamelModel):
    """Schema for updating an Investment."""

    description: Optional[str] = None
    status: Optional[InvestmentStatus] = None
    reference: Optional[str] = None


class InvestmentResponse(CamelModel):
    """Schema for Investment API response."""

    id: str
    user_id: str
    investment_account_id: str
    account_name: Optional[str] = None
    asset_type: AssetType
    asset_name: str
    amount: float
    description: Optional[str] = None
    reference: Optional[str] = None
    status: InvestmentStatus
    created_at: datetime
    updated_at: datetime


class PriceResponse(CamelModel):
    """Current and previous-close price for one symbol."""

    symbol: str
    current_price: float
    previous_close: float
