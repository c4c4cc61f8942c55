"""Transaction model - a credit or debit against an account."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import relationship

from database import Base
from models.utils import generate_uuid


class Transaction(Base):
    """A single money movement on an account.

    ``amount`` is always positive; ``type`` carries the direction. Status
    moves only from pending to completed or rejected.
    """

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    account_id = Column(
        String(36), ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    amount = Column(Numeric(18, 4), nullable=False)
    type = Column(String, nullable=False)  # "credit" | "debit"
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    reference = Column(String, nullable=True)
    status = Column(String, nullable=False, default="pending")  # "pending" | "completed" | "rejected"
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), index=True)

    # Relationships
    user = relationship("User", back_populates="transactions")
    account = relationship("Account", back_populates="transactions")
