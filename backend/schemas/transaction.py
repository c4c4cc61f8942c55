"""Pydantic schemas for transactions."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from schemas.base import CamelModel


class TransactionType(str, Enum):
    """Direction of a transaction."""

    credit = "credit"
    debit = "debit"


class TransactionStatus(str, Enum):
    """Lifecycle of a transaction: pending, then completed or rejected."""

    pending = "pending"
    completed = "completed"
    rejected = "rejected"


class TransactionCreate(CamelModel):
    """Schema for creating a Transaction."""

    account_id: str
    amount: Decimal = Field(gt=0)
    type: TransactionType
    description: Optional[str] = None
    category: Optional[str] = None
    reference: Optional[str] = None
    status: TransactionStatus = TransactionStatus.pending


class TransactionStatusUpdate(CamelModel):
    """Schema for a status transition.

    Kept as a plain string so an invalid target status is reported by the
    transition rule (400) rather than by request validation.
    """

    status: str


class TransactionResponse(CamelModel):
    """Schema for Transaction API response."""

    id: str
    user_id: str
    account_id: str
    account_name: Optional[str] = None
    amount: float
    type: TransactionType
    description: Optional[str] = None
    category: Optional[str] = None
    reference: Optional[str] = None
    status: TransactionStatus
    created_at: datetime


class TransactionListResponse(CamelModel):
    """One page of transactions plus the total match count."""

    transactions: list[TransactionResponse]
    total: int
    page: int
    limit: int
