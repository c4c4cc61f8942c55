"""Investment model - a holding of a named asset."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Column, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import relationship

from database import Base
from models.utils import generate_uuid


class Investment(Base):
    """A quantity of an asset (stock, bond or crypto) held in an investment account.

    ``amount`` is the quantity held, not a currency value. Once ``status`` is
    closed the record is immutable.
    """

    __tablename__ = "investments"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    investment_account_id = Column(
        String(36), ForeignKey("investment_accounts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    asset_type = Column(String, nullable=False)  # "Stock" | "Bond" | "Crypto"
    asset_name = Column(String, nullable=False)  # Ticker/symbol
    amount = Column(Numeric(18, 8), nullable=False, default=Decimal("0"))
    description = Column(Text, nullable=True)
    reference = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")  # "active" | "closed"
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    user = relationship("User", back_populates="investments")
    investment_account = relationship("InvestmentAccount", back_populates="investments")
