"""Unit tests for TransactionService."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from services.transaction_service import TransactionFilter, TransactionService
from tests.fixtures import create_account, create_transaction


class TestCreateTransaction:
    def test_creates_pending_by_default(self, db, user, debit_account):
        txn = TransactionService.create_transaction(
            db,
            user.id,
            account_id=debit_account.id,
            amount=Decimal("12.50"),
            transaction_type="credit",
            description="Paycheck",
        )

        assert txn.id is not None
        assert txn.status == "pending"
        assert txn.user_id == user.id
        assert txn.amount == Decimal("12.50")

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-1")])
    def test_rejects_non_positive_amount(self, db, user, debit_account, amount):
        with pytest.raises(ValueError, match="greater than zero"):
            TransactionService.create_transaction(
                db, user.id, account_id=debit_account.id, amount=amount, transaction_type="debit"
            )

    def test_other_users_account_returns_none(self, db, other_user, debit_account):
        result = TransactionService.create_transaction(
            db,
            other_user.id,
            account_id=debit_account.id,
            amount=Decimal("5"),
            transaction_type="debit",
        )
        assert result is None


class TestUpdateStatus:
    """Pending transactions move to completed or rejected exactly once."""

    @pytest.mark.parametrize("target", ["completed", "rejected"])
    def test_pending_to_terminal(self, db, user, debit_account, target):
        txn = create_transaction(db, debit_account, "10", "credit")

        updated = TransactionService.update_status(db, user.id, txn.id, target)

        assert updated.status == target

    def test_completed_cannot_change(self, db, user, debit_account):
        txn = create_transaction(db, debit_account, "10", "credit", status="completed")

        with pytest.raises(ValueError, match="Only pending transactions"):
            TransactionService.update_status(db, user.id, txn.id, "rejected")

        db.refresh(txn)
        assert txn.status == "completed"

    def test_invalid_target(self, db, user, debit_account):
        txn = create_transaction(db, debit_account, "10", "credit")

        with pytest.raises(ValueError, match="Invalid status update"):
            TransactionService.update_status(db, user.id, txn.id, "pending")

        db.refresh(txn)
        assert txn.status == "pending"

    def test_not_owned_returns_none(self, db, other_user, debit_account):
        txn = create_transaction(db, debit_account, "10", "credit")

        assert TransactionService.update_status(db, other_user.id, txn.id, "completed") is None


class TestListing:
    def test_list_recent_newest_first_and_limited(self, db, user, debit_account):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(7):
            create_transaction(db, debit_account, str(i + 1), "credit", created_at=base + timedelta(hours=i))

        recent = TransactionService.list_recent(db, user.id, limit=5)

        assert [t.amount for t in recent] == [Decimal(str(n)) for n in (7, 6, 5, 4, 3)]
        assert recent[0].account.name == "Checking"

    def test_list_recent_scoped_to_user(self, db, user, other_user, debit_account):
        theirs = create_account(db, other_user, "Theirs", "debit")
        create_transaction(db, theirs, "99", "credit")
        create_transaction(db, debit_account, "1", "credit")

        recent = TransactionService.list_recent(db, user.id)

        assert len(recent) == 1
        assert recent[0].user_id == user.id

    def test_list_page_with_filters(self, db, user, debit_account, credit_account):
        create_transaction(db, debit_account, "1", "credit", created_at=datetime(2024, 3, 1, 10, tzinfo=timezone.utc))
        create_transaction(db, debit_account, "2", "debit", created_at=datetime(2024, 3, 5, 23, 30, tzinfo=timezone.utc))
        create_transaction(db, credit_account, "3", "debit", created_at=datetime(2024, 3, 6, 1, tzinfo=timezone.utc))

        page, total = TransactionService.list_page(
            db,
            user.id,
            filters=TransactionFilter(start_date=date(2024, 3, 2), end_date=date(2024, 3, 5)),
        )
        assert total == 1
        assert page[0].amount == Decimal("2")

        page, total = TransactionService.list_page(
            db, user.id, filters=TransactionFilter(account_ids=[credit_account.id])
        )
        assert total == 1
        assert page[0].account_id == credit_account.id

        page, total = TransactionService.list_page(
            db, user.id, filters=TransactionFilter(types=["debit"])
        )
        assert total == 2

    def test_list_page_pagination(self, db, user, debit_account):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(5):
            create_transaction(db, debit_account, str(i + 1), "credit", created_at=base + timedelta(days=i))

        page, total = TransactionService.list_page(db, user.id, page=2, limit=2)

        assert total == 5
        assert [t.amount for t in page] == [Decimal("3"), Decimal("2")]
