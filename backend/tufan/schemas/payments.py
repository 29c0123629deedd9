"""Schemas for payment and refund recording."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from tufan.schemas.pricing import BookingChargesInput, RawNumber
from tufan.services.payments_service import PaymentMethod
from tufan.services.pricing_service import PaymentStatus


class PaymentRecordRequest(BaseModel):
    """Request payload for recording a payment against a booking."""

    charges: BookingChargesInput
    amount: RawNumber = None
    method: PaymentMethod = PaymentMethod.CASH
    note: str | None = None


class PaymentRefundRequest(BaseModel):
    """Request payload for issuing a refund."""

    charges: BookingChargesInput
    amount: RawNumber = None
    note: str | None = None


class PaymentOutcomeRead(BaseModel):
    """Outcome of a payment or refund request."""

    accepted: bool
    reason: str | None = None
    amount: Decimal
    advance_payment: Decimal
    remaining_payment: Decimal
    payment_status: PaymentStatus
    method: PaymentMethod | None = None

    model_config = ConfigDict(from_attributes=True)
