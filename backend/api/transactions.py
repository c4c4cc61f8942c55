"""Transactions API endpoints."""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from api.auth import get_current_user_id
from api.helpers import transaction_response_dict
from database import get_db
from schemas import (
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
    TransactionStatusUpdate,
    TransactionType,
)
from services.transaction_service import TransactionFilter, TransactionService
from utils.query_params import parse_csv_param

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["transactions"])

_VALID_TYPES = {t.value for t in TransactionType}


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    start_date: Optional[date] = Query(None, alias="startDate", description="YYYY-MM-DD, inclusive"),
    end_date: Optional[date] = Query(None, alias="endDate", description="YYYY-MM-DD, inclusive"),
    account_ids: Optional[str] = Query(None, alias="accountIds", description="Comma-separated account IDs"),
    types: Optional[str] = Query(None, description="Comma-separated: credit, debit"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List the caller's transactions, newest first, with filters and paging."""
    type_list = [t for t in (parse_csv_param(types) or []) if t in _VALID_TYPES]
    filters = TransactionFilter(
        start_date=start_date,
        end_date=end_date,
        account_ids=parse_csv_param(account_ids),
        types=type_list or None,
    )
    transactions, total = TransactionService.list_page(
        db, user_id, page=page, limit=limit, filters=filters
    )
    return {
        "transactions": [transaction_response_dict(t) for t in transactions],
        "total": total,
        "page": page,
        "limit": limit,
    }


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    data: TransactionCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Record a transaction on one of the caller's accounts."""
    try:
        transaction = TransactionService.create_transaction(
            db,
            user_id,
            account_id=data.account_id,
            amount=data.amount,
            transaction_type=data.type.value,
            description=data.description,
            category=data.category,
            reference=data.reference,
            status=data.status.value,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if transaction is None:
        raise HTTPException(status_code=404, detail="Account not found")
    return transaction_response_dict(transaction)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get one of the caller's transactions."""
    transaction = TransactionService.get_transaction(db, user_id, transaction_id)
    if transaction is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction_response_dict(transaction)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction_status(
    transaction_id: str,
    data: TransactionStatusUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Complete or reject a pending transaction."""
    try:
        transaction = TransactionService.update_status(db, user_id, transaction_id, data.status)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if transaction is None:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction_response_dict(transaction)
