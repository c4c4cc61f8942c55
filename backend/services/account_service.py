"""Account management service."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from models import Account

logger = logging.getLogger(__name__)


class AccountService:
    """Service for bank account CRUD operations, scoped to one user."""

    @staticmethod
    def list_accounts(db: Session, user_id: str) -> list[Account]:
        """List the user's accounts, oldest first."""
        return (
            db.query(Account)
            .filter(Account.user_id == user_id)
            .order_by(Account.created_at.asc())
            .all()
        )

    @staticmethod
    def get_account(db: Session, user_id: str, account_id: str) -> Account | None:
        """Get one of the user's accounts by ID."""
        return (
            db.query(Account)
            .filter(Account.id == account_id, Account.user_id == user_id)
            .first()
        )

    @staticmethod
    def create_account(
        db: Session,
        user_id: str,
        *,
        name: str,
        account_type: str,
        currency: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Account:
        """Create a new account. The type is fixed from here on."""
        account = Account(
            user_id=user_id,
            name=name,
            type=account_type,
            currency=currency,
            description=description,
        )
        db.add(account)
        db.commit()
        db.refresh(account)
        logger.info("Account created: %s (id=%s, type=%s)", account.name, account.id, account.type)
        return account

    @staticmethod
    def update_account(
        db: Session,
        user_id: str,
        account_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> Account | None:
        """Update an account's name and/or description.

        Returns:
            Updated Account, or None if not found or not owned by the user.
        """
        account = AccountService.get_account(db, user_id, account_id)
        if not account:
            return None

        if name is not None:
            account.name = name
        if description is not None:
            account.description = description

        db.commit()
        db.refresh(account)
        logger.info("Account updated: %s (id=%s)", account.name, account.id)
        return account
