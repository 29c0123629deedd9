"""Live status endpoints for convention bookings."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from tufan.api import deps
from tufan.core.settings import PricingSettings
from tufan.schemas.booking_status import BookingStatusRead, BookingStatusRequest
from tufan.services import booking_status_service

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("/status", response_model=BookingStatusRead)
async def convention_booking_status(
    payload: BookingStatusRequest,
    config: Annotated[PricingSettings, Depends(deps.get_pricing_config)],
) -> BookingStatusRead:
    program_status = booking_status_service.real_time_program_status(
        payload.program_status, payload.event_date, payload.time_slot
    )
    badge = booking_status_service.real_time_payment_status(
        payload.remaining_payment, payload.payment_status
    )
    return BookingStatusRead(
        program_status=program_status,
        payment_status=badge.status,
        payment_display_text=badge.display_text,
        is_due=badge.is_due,
        payment_due_text=booking_status_service.format_payment_due(
            payload.remaining_payment, config.currency_symbol
        ),
    )
