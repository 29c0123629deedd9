"""Schemas for real-time convention booking status."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import AliasChoices, BaseModel, Field

from tufan.schemas.pricing import RawNumber
from tufan.services.pricing_service import PaymentStatus


class BookingStatusRequest(BaseModel):
    """Stored convention booking fields needed to derive live status."""

    event_date: date | datetime = Field(
        validation_alias=AliasChoices("event_date", "eventDate")
    )
    time_slot: str | None = Field(
        default=None, validation_alias=AliasChoices("time_slot", "timeSlot")
    )
    program_status: str = Field(
        default="confirmed",
        validation_alias=AliasChoices("program_status", "programStatus"),
    )
    remaining_payment: RawNumber = Field(
        default=None,
        validation_alias=AliasChoices("remaining_payment", "remainingPayment"),
    )
    payment_status: PaymentStatus | None = Field(
        default=None,
        validation_alias=AliasChoices("payment_status", "paymentStatus"),
    )


class BookingStatusRead(BaseModel):
    program_status: str
    payment_status: PaymentStatus
    payment_display_text: str
    is_due: bool
    payment_due_text: str
