"""Payment entity model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, utc_now


class PaymentBase(Base):
    """Base fields for a payment against a booking."""

    booking_id: int = Field(foreign_key="booking.booking_id", index=True)
    amount: float = Field(gt=0.0)
    payment_method: str = Field(max_length=32, description="card, bank_transfer, cash, ...")
    payment_status: str = Field(default="pending", max_length=32)
    transaction_ref: Optional[str] = Field(default=None, max_length=128)


class Payment(PaymentBase, table=True):
    """Persistent payment.

    Table: payment
    """

    __tablename__ = "payment"
    __table_args__ = ({"extend_existing": True},)

    payment_id: Optional[int] = Field(default=None, primary_key=True)
    payment_date: datetime = Field(default_factory=utc_now)

    def __repr__(self) -> str:
        return f"Payment(id={self.payment_id}, booking={self.booking_id}, status={self.payment_status})"
