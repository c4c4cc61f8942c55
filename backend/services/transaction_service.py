"""Transaction service - listing, creation and status transitions."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from models import Account, Transaction
from schemas import TransactionStatus

logger = logging.getLogger(__name__)

# Status values a pending transaction may move to.
ALLOWED_STATUS_TARGETS = frozenset({TransactionStatus.completed.value, TransactionStatus.rejected.value})


@dataclass
class TransactionFilter:
    """Optional filters for listing transactions."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None  # inclusive
    account_ids: Optional[list[str]] = None
    types: Optional[list[str]] = None


class TransactionService:
    """Service for a user's transactions."""

    @staticmethod
    def _base_query(db: Session, user_id: str, filters: Optional[TransactionFilter] = None):
        query = db.query(Transaction).filter(Transaction.user_id == user_id)
        if filters is None:
            return query

        if filters.start_date is not None:
            start = datetime.combine(filters.start_date, time.min, tzinfo=timezone.utc)
            query = query.filter(Transaction.created_at >= start)
        if filters.end_date is not None:
            # Exclusive upper bound on the following day keeps end_date inclusive
            end = datetime.combine(filters.end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
            query = query.filter(Transaction.created_at < end)
        if filters.account_ids:
            query = query.filter(Transaction.account_id.in_(filters.account_ids))
        if filters.types:
            query = query.filter(Transaction.type.in_(filters.types))
        return query

    @staticmethod
    def list_all(db: Session, user_id: str) -> list[Transaction]:
        """All of the user's transactions (unordered)."""
        return TransactionService._base_query(db, user_id).all()

    @staticmethod
    def list_page(
        db: Session,
        user_id: str,
        *,
        page: int = 1,
        limit: int = 10,
        filters: Optional[TransactionFilter] = None,
    ) -> tuple[list[Transaction], int]:
        """One page of the user's transactions, newest first.

        Returns:
            Tuple of (transactions with account loaded, total matching count)
        """
        query = TransactionService._base_query(db, user_id, filters)
        total = query.count()
        transactions = (
            query.options(joinedload(Transaction.account))
            .order_by(Transaction.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return transactions, total

    @staticmethod
    def list_recent(db: Session, user_id: str, limit: int = 5) -> list[Transaction]:
        """The user's most recently created transactions, with account loaded."""
        return (
            db.query(Transaction)
            .options(joinedload(Transaction.account))
            .filter(Transaction.user_id == user_id)
            .order_by(Transaction.created_at.desc())
            .limit(limit)
            .all()
        )

    @staticmethod
    def get_transaction(db: Session, user_id: str, transaction_id: str) -> Transaction | None:
        """Get one of the user's transactions by ID."""
        return (
            db.query(Transaction)
            .options(joinedload(Transaction.account))
            .filter(Transaction.id == transaction_id, Transaction.user_id == user_id)
            .first()
        )

    @staticmethod
    def create_transaction(
        db: Session,
        user_id: str,
        *,
        account_id: str,
        amount: Decimal,
        transaction_type: str,
        description: Optional[str] = None,
        category: Optional[str] = None,
        reference: Optional[str] = None,
        status: str = TransactionStatus.pending.value,
    ) -> Transaction | None:
        """Record a transaction on one of the user's accounts.

        Returns:
            The created Transaction, or None if the account is not the user's.

        Raises:
            ValueError: If amount is not positive.
        """
        if amount <= 0:
            raise ValueError("Transaction amount must be greater than zero")

        account = (
            db.query(Account)
            .filter(Account.id == account_id, Account.user_id == user_id)
            .first()
        )
        if not account:
            return None

        transaction = Transaction(
            user_id=user_id,
            account_id=account_id,
            amount=amount,
            type=transaction_type,
            description=description,
            category=category,
            reference=reference,
            status=status,
        )
        db.add(transaction)
        db.commit()
        db.refresh(transaction)
        logger.info(
            "Transaction created: %s %s on account %s (id=%s)",
            transaction.type, transaction.amount, account_id, transaction.id,
        )
        return transaction

    @staticmethod
    def update_status(
        db: Session, user_id: str, transaction_id: str, status: str
    ) -> Transaction | None:
        """Move a pending transaction to completed or rejected.

        Both rules are checked before any write.

        Returns:
            Updated Transaction, or None if not found or not owned by the user.

        Raises:
            ValueError: If the transaction is no longer pending, or the target
                        status is not completed/rejected.
        """
        transaction = TransactionService.get_transaction(db, user_id, transaction_id)
        if not transaction:
            return None

        if transaction.status != TransactionStatus.pending:
            raise ValueError("Only pending transactions can be updated")
        if status not in ALLOWED_STATUS_TARGETS:
            raise ValueError("Invalid status update. Only 'completed' or 'rejected' allowed")

        transaction.status = status
        db.commit()
        db.refresh(transaction)
        logger.info("Transaction %s moved to %s", transaction.id, status)
        return transaction
