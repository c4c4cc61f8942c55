"""Service for investment accounts and the holdings inside them."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from models import Investment, InvestmentAccount
from schemas import InvestmentStatus

logger = logging.getLogger(__name__)


class ClosedInvestmentError(ValueError):
    """Raised when an update targets a closed (immutable) investment."""

    pass


class InvestmentService:
    """Service for CRUD operations on a user's investment accounts and holdings."""

    # --- Investment accounts ---

    @staticmethod
    def list_investment_accounts(db: Session, user_id: str) -> list[InvestmentAccount]:
        """List the user's investment accounts, newest first."""
        return (
            db.query(InvestmentAccount)
            .filter(InvestmentAccount.user_id == user_id)
            .order_by(InvestmentAccount.created_at.desc())
            .all()
        )

    @staticmethod
    def get_investment_account(
        db: Session, user_id: str, investment_account_id: str
    ) -> InvestmentAccount | None:
        """Get one of the user's investment accounts by ID."""
        return (
            db.query(InvestmentAccount)
            .filter(
                InvestmentAccount.id == investment_account_id,
                InvestmentAccount.user_id == user_id,
            )
            .first()
        )

    @staticmethod
    def create_investment_account(
        db: Session,
        user_id: str,
        *,
        name: str,
        description: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> InvestmentAccount:
        """Create a new investment account."""
        investment_account = InvestmentAccount(
            user_id=user_id,
            name=name,
            description=description,
            currency=currency,
        )
        db.add(investment_account)
        db.commit()
        db.refresh(investment_account)
        logger.info(
            "Investment account created: %s (id=%s)",
            investment_account.name, investment_account.id,
        )
        return investment_account

    @staticmethod
    def update_investment_account(
        db: Session,
        user_id: str,
        investment_account_id: str,
        *,
        description: Optional[str] = None,
    ) -> InvestmentAccount | None:
        """Update an investment account's description."""
        investment_account = InvestmentService.get_investment_account(
            db, user_id, investment_account_id
        )
        if not investment_account:
            return None

        if description is not None:
            investment_account.description = description
        db.commit()
        db.refresh(investment_account)
        logger.info("Investment account updated: id=%s", investment_account.id)
        return investment_account

    # --- Investments ---

    @staticmethod
    def list_investments(db: Session, user_id: str) -> list[Investment]:
        """List the user's holdings, newest first, with their account loaded."""
        return (
            db.query(Investment)
            .options(joinedload(Investment.investment_account))
            .filter(Investment.user_id == user_id)
            .order_by(Investment.created_at.desc())
            .all()
        )

    @staticmethod
    def get_investment(db: Session, user_id: str, investment_id: str) -> Investment | None:
        """Get one of the user's holdings by ID."""
        return (
            db.query(Investment)
            .options(joinedload(Investment.investment_account))
            .filter(Investment.id == investment_id, Investment.user_id == user_id)
            .first()
        )

    @staticmethod
    def create_investment(
        db: Session,
        user_id: str,
        *,
        investment_account_id: str,
        amount: Decimal,
        asset_type: str,
        asset_name: str,
        description: Optional[str] = None,
        reference: Optional[str] = None,
        status: str = InvestmentStatus.active.value,
    ) -> Investment | None:
        """Add a holding to one of the user's investment accounts.

        Returns:
            The created Investment, or None if the investment account is not
            the user's.

        Raises:
            ValueError: If amount is not positive or asset_name is blank.
        """
        if amount <= 0:
            raise ValueError("Investment amount must be greater than zero")
        if not asset_name.strip():
            raise ValueError("assetName is required")

        investment_account = InvestmentService.get_investment_account(
            db, user_id, investment_account_id
        )
        if not investment_account:
            return None

        investment = Investment(
            user_id=user_id,
            investment_account_id=investment_account_id,
            amount=amount,
            asset_type=asset_type,
            asset_name=asset_name.strip(),
            description=description,
            reference=reference,
            status=status,
        )
        db.add(investment)
        db.commit()
        db.refresh(investment)
        logger.info(
            "Investment created: %s %s in %s (id=%s)",
            investment.amount, investment.asset_name,
            investment_account_id, investment.id,
        )
        return investment

    @staticmethod
    def update_investment(
        db: Session,
        user_id: str,
        investment_id: str,
        *,
        description: Optional[str] = None,
        status: Optional[str] = None,
        reference: Optional[str] = None,
    ) -> Investment | None:
        """Update a holding's description, status or reference.

        The closed check runs before any field is touched, so a rejected
        update leaves the record unchanged.

        Returns:
            Updated Investment, or None if not found or not owned by the user.

        Raises:
            ClosedInvestmentError: If the holding is closed.
        """
        investment = InvestmentService.get_investment(db, user_id, investment_id)
        if not investment:
            return None

        if investment.status == InvestmentStatus.closed:
            raise ClosedInvestmentError("Cannot update a closed investment")

        if description is not None:
            investment.description = description
        if status is not None:
            investment.status = status
        if reference is not None:
            investment.reference = reference

        db.commit()
        db.refresh(investment)
        logger.info("Investment updated: id=%s status=%s", investment.id, investment.status)
        return investment
