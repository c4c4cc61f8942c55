"""Shared API helpers for route handlers.

Common query patterns and response builders used across multiple route files.
"""

from typing import TypeVar

from fastapi import HTTPException
from sqlalchemy.orm import Session

from database import Base
from models import Investment, Transaction

T = TypeVar("T", bound=Base)


def get_owned_or_404(
    db: Session, model: type[T], entity_id: str, user_id: str, detail: str = "Not found"
) -> T:
    """Fetch a single user-owned entity by primary key or raise 404.

    An entity owned by someone else is reported exactly like a missing one.

    Args:
        db: Database session.
        model: SQLAlchemy model class with ``id`` and ``user_id`` columns.
        entity_id: Primary key value.
        user_id: The authenticated caller.
        detail: Error message for the 404 response.

    Returns:
        The entity instance.

    Raises:
        HTTPException: 404 if the entity doesn't exist or isn't the caller's.
    """
    entity = (
        db.query(model)
        .filter(model.id == entity_id, model.user_id == user_id)
        .first()
    )
    if not entity:
        raise HTTPException(status_code=404, detail=detail)
    return entity


def transaction_response_dict(transaction: Transaction) -> dict:
    """Build a TransactionResponse-compatible dict with the account name flattened in.

    Args:
        transaction: A Transaction, ideally with its account relationship loaded.

    Returns:
        Dict matching the TransactionResponse schema.
    """
    return {
        "id": transaction.id,
        "user_id": transaction.user_id,
        "account_id": transaction.account_id,
        "account_name": transaction.account.name if transaction.account else None,
        "amount": transaction.amount,
        "type": transaction.type,
        "description": transaction.description,
        "category": transaction.category,
        "reference": transaction.reference,
        "status": transaction.status,
        "created_at": transaction.created_at,
    }


def investment_response_dict(investment: Investment) -> dict:
    """Build an InvestmentResponse-compatible dict with the account name flattened in."""
    return {
        "id": investment.id,
        "user_id": investment.user_id,
        "investment_account_id": investment.investment_account_id,
        "account_name": (
            investment.investment_account.name if investment.investment_account else None
        ),
        "asset_type": investment.asset_type,
        "asset_name": investment.asset_name,
        "amount": investment.amount,
        "description": investment.description,
        "reference": investment.reference,
        "status": investment.status,
        "created_at": investment.created_at,
        "updated_at": investment.updated_at,
    }
