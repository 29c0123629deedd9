"""Pricing-related API endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from tufan.api import deps
from tufan.core.settings import PricingSettings
from tufan.schemas.pricing import (
    BookingChargesInput,
    ConventionBaseRead,
    ConventionBaseRequest,
    PricingQuoteRead,
    RoomBaseRead,
    RoomBaseRequest,
)
from tufan.services import pricing_service

router = APIRouter(prefix="/pricing", tags=["pricing"])


def build_charges(
    payload: BookingChargesInput, config: PricingSettings
) -> pricing_service.BookingCharges:
    """Parse raw form charges once, at the API boundary."""

    return pricing_service.BookingCharges.from_form(
        payload.form_fields(),
        default_vat_percentage=config.default_vat_percentage,
    )


@router.post("/quote", response_model=PricingQuoteRead, summary="Quote booking pricing")
async def quote_booking_pricing(
    payload: BookingChargesInput,
    config: Annotated[PricingSettings, Depends(deps.get_pricing_config)],
) -> PricingQuoteRead:
    charges = build_charges(payload, config)
    quote = pricing_service.quote_booking(
        charges, current_status=payload.payment_status
    )
    return PricingQuoteRead.model_validate(quote)


@router.post(
    "/room-base", response_model=RoomBaseRead, summary="Room rent for a stay"
)
async def room_base_pricing(payload: RoomBaseRequest) -> RoomBaseRead:
    try:
        nights = pricing_service.calculate_nights(payload.check_in, payload.check_out)
        base_amount = pricing_service.room_base_amount(
            payload.price_per_night, payload.check_in, payload.check_out
        )
    except (TypeError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return RoomBaseRead(nights=nights, base_amount=base_amount)


@router.post(
    "/convention-base",
    response_model=ConventionBaseRead,
    summary="Hall, food and add-on costs for a convention booking",
)
async def convention_base_pricing(
    payload: ConventionBaseRequest,
) -> ConventionBaseRead:
    breakdown = pricing_service.convention_base_amount(
        payload.hall_rent,
        payload.price_per_person,
        payload.number_of_guests,
        payload.addon_prices,
    )
    return ConventionBaseRead.model_validate(breakdown)
