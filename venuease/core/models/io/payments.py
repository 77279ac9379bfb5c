"""Payment I/O models for API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from venuease.core.models.domain.enums import PaymentStatus


class PaymentCreate(BaseModel):
    booking_id: int
    amount: float = Field(gt=0.0)
    payment_method: str = Field(min_length=1, max_length=32, examples=["card", "bank_transfer", "cash"])
    payment_status: PaymentStatus = PaymentStatus.pending
    transaction_ref: Optional[str] = Field(default=None, max_length=128)


class PaymentRead(BaseModel):
    payment_id: int
    booking_id: int
    amount: float
    payment_method: str
    payment_status: str
    payment_date: datetime
    transaction_ref: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentUpdate(BaseModel):
    amount: Optional[float] = Field(default=None, gt=0.0)
    payment_method: Optional[str] = Field(default=None, min_length=1, max_length=32)
    payment_status: Optional[PaymentStatus] = None
    transaction_ref: Optional[str] = Field(default=None, max_length=128)
