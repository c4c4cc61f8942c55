"""Investment accounts and investments API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from api.auth import get_current_user_id
from api.helpers import get_owned_or_404, investment_response_dict
from database import get_db
from models import InvestmentAccount
from schemas import (
    InvestmentAccountCreate,
    InvestmentAccountResponse,
    InvestmentAccountUpdate,
    InvestmentCreate,
    InvestmentResponse,
    InvestmentUpdate,
)
from services.investment_service import ClosedInvestmentError, InvestmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/investments", tags=["investments"])


# --- Investment accounts (declared before /{investment_id}) ---


@router.get("/accounts", response_model=list[InvestmentAccountResponse])
def list_investment_accounts(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List the caller's investment accounts."""
    return InvestmentService.list_investment_accounts(db, user_id)


@router.post("/accounts", response_model=InvestmentAccountResponse, status_code=201)
def create_investment_account(
    data: InvestmentAccountCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Create an investment account."""
    return InvestmentService.create_investment_account(
        db, user_id, name=data.name, description=data.description, currency=data.currency
    )


@router.get("/accounts/{investment_account_id}", response_model=InvestmentAccountResponse)
def get_investment_account(
    investment_account_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get one of the caller's investment accounts."""
    return get_owned_or_404(
        db, InvestmentAccount, investment_account_id, user_id, "Investment account not found"
    )


@router.put("/accounts/{investment_account_id}", response_model=InvestmentAccountResponse)
def update_investment_account(
    investment_account_id: str,
    data: InvestmentAccountUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Update an investment account's description."""
    investment_account = InvestmentService.update_investment_account(
        db, user_id, investment_account_id, description=data.description
    )
    if investment_account is None:
        raise HTTPException(status_code=404, detail="Investment account not found")
    return investment_account


# --- Investments ---


@router.get("", response_model=list[InvestmentResponse])
def list_investments(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """List the caller's holdings with their account names."""
    return [
        investment_response_dict(inv)
        for inv in InvestmentService.list_investments(db, user_id)
    ]


@router.post("", response_model=InvestmentResponse, status_code=201)
def create_investment(
    data: InvestmentCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Add a holding to one of the caller's investment accounts."""
    try:
        investment = InvestmentService.create_investment(
            db,
            user_id,
            investment_account_id=data.investment_account_id,
            amount=data.amount,
            asset_type=data.asset_type.value,
            asset_name=data.asset_name,
            description=data.description,
            reference=data.reference,
            status=data.status.value,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if investment is None:
        raise HTTPException(status_code=404, detail="Investment account not found")
    return investment_response_dict(investment)


@router.get("/{investment_id}", response_model=InvestmentResponse)
def get_investment(
    investment_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get one of the caller's holdings."""
    investment = InvestmentService.get_investment(db, user_id, investment_id)
    if investment is None:
        raise HTTPException(status_code=404, detail="Investment not found")
    return investment_response_dict(investment)


@router.put("/{investment_id}", response_model=InvestmentResponse)
def update_investment(
    investment_id: str,
    data: InvestmentUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Update a holding's description, status or reference. Closed holdings are read-only."""
    try:
        investment = InvestmentService.update_investment(
            db,
            user_id,
            investment_id,
            description=data.description,
            status=data.status.value if data.status is not None else None,
            reference=data.reference,
        )
    except ClosedInvestmentError as e:
        raise HTTPException(status_code=403, detail=str(e))
    if investment is None:
        raise HTTPException(status_code=404, detail="Investment not found")
    return investment_response_dict(investment)
