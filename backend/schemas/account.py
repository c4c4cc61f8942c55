"""Pydantic schemas for bank accounts."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from schemas.base import CamelModel


class AccountType(str, Enum):
    """Valid account types."""

    debit = "debit"
    credit = "credit"


class AccountCreate(CamelModel):
    """Schema for creating an Account."""

    name: str = Field(min_length=1)
    type: AccountType
    currency: Optional[str] = None
    description: Optional[str] = None


class AccountUpdate(CamelModel):
    """Schema for updating an Account. ``type`` is intentionally absent."""

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class AccountResponse(CamelModel):
    """Schema for Account API response."""

    id: str
    user_id: str
    name: str
    type: AccountType
    currency: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
