"""Test fixtures and sample data."""
from datetime import datetime, timezone
from decimal import Decimal

import bcrypt
import pytest
from sqlalchemy.orm import Session

from models import Account, Investment, InvestmentAccount, Transaction, User
from services.auth_service import create_access_token

TEST_PASSWORD = "password123"


def _fast_hash(password: str) -> str:
    """bcrypt hash with minimal rounds so fixtures stay quick."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")


def create_user(db: Session, email: str, name: str | None = None) -> User:
    """Create and persist a user whose password is TEST_PASSWORD."""
    u = User(email=email, name=name, password_hash=_fast_hash(TEST_PASSWORD))
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def bearer_headers(user_id: str) -> dict[str, str]:
    """Authorization header carrying a fresh token for the user."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def create_account(
    db: Session, user: User, name: str, account_type: str, currency: str | None = "USD"
) -> Account:
    """Create a bank account owned by ``user``."""
    acc = Account(user_id=user.id, name=name, type=account_type, currency=currency)
    db.add(acc)
    db.commit()
    db.refresh(acc)
    return acc


def create_transaction(
    db: Session,
    account: Account,
    amount: Decimal | str,
    txn_type: str,
    *,
    status: str = "pending",
    created_at: datetime | None = None,
    description: str | None = None,
) -> Transaction:
    """Create a transaction on ``account`` for the account's owner.

    Args:
        created_at: Explicit creation time; defaults to now (UTC).
    """
    txn = Transaction(
        user_id=account.user_id,
        account_id=account.id,
        amount=Decimal(str(amount)),
        type=txn_type,
        status=status,
        description=description,
        created_at=created_at or datetime.now(timezone.utc),
    )
    db.add(txn)
    db.commit()
    db.refresh(txn)
    return txn


def create_investment(
    db: Session,
    investment_account: InvestmentAccount,
    asset_name: str,
    amount: Decimal | str,
    *,
    asset_type: str = "Stock",
    status: str = "active",
    created_at: datetime | None = None,
) -> Investment:
    """Create a holding inside ``investment_account`` for the account's owner."""
    inv = Investment(
        user_id=investment_account.user_id,
        investment_account_id=investment_account.id,
        asset_type=asset_type,
        asset_name=asset_name,
        amount=Decimal(str(amount)),
        status=status,
        created_at=created_at or datetime.now(timezone.utc),
    )
    db.add(inv)
    db.commit()
    db.refresh(inv)
    return inv


@pytest.fixture
def user(db: Session) -> User:
    """Create the primary test user."""
    return create_user(db, "alice@example.com", name="Alice")


@pytest.fixture
def other_user(db: Session) -> User:
    """Create a second user for ownership checks."""
    return create_user(db, "bob@example.com", name="Bob")


@pytest.fixture
def auth_headers(user: User) -> dict[str, str]:
    """Bearer header for the primary test user."""
    return bearer_headers(user.id)


@pytest.fixture
def other_user_headers(other_user: User) -> dict[str, str]:
    """Bearer header for the second test user."""
    return bearer_headers(other_user.id)


@pytest.fixture
def debit_account(db: Session, user: User) -> Account:
    """Create a checking-style debit account."""
    return create_account(db, user, "Checking", "debit")


@pytest.fixture
def credit_account(db: Session, user: User) -> Account:
    """Create a credit-card-style credit account."""
    return create_account(db, user, "Credit Card", "credit")


@pytest.fixture
def investment_account(db: Session, user: User) -> InvestmentAccount:
    """Create a test investment account."""
    ia = InvestmentAccount(user_id=user.id, name="Brokerage", currency="USD")
    db.add(ia)
    db.commit()
    db.refresh(ia)
    return ia
