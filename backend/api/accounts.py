"""Accounts API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from api.auth import get_current_user_id
from api.helpers import get_owned_or_404
from database import get_db
from models import Account
from schemas import AccountCreate, AccountResponse, AccountUpdate
from services.account_service import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.get("", response_model=list[AccountResponse])
def list_accounts(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List the caller's bank accounts."""
    return AccountService.list_accounts(db, user_id)


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    data: AccountCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Create a bank account."""
    return AccountService.create_account(
        db,
        user_id,
        name=data.name,
        account_type=data.type.value,
        currency=data.currency,
        description=data.description,
    )


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get one of the caller's accounts."""
    return get_owned_or_404(db, Account, account_id, user_id, "Account not found")


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: str,
    data: AccountUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Update an account's name or description. The type cannot change."""
    account = AccountService.update_account(
        db, user_id, account_id, name=data.name, description=data.description
    )
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    return account
