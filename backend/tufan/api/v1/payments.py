"""Payment and refund recording endpoints.

Rejected actions are returned with ``accepted: false`` rather than an error
status so the dashboard can show the reason next to the form.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from tufan.api import deps
from tufan.api.v1.pricing import build_charges
from tufan.core.settings import PricingSettings
from tufan.schemas.payments import (
    PaymentOutcomeRead,
    PaymentRecordRequest,
    PaymentRefundRequest,
)
from tufan.services import payments_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/record", response_model=PaymentOutcomeRead)
async def record_booking_payment(
    payload: PaymentRecordRequest,
    config: Annotated[PricingSettings, Depends(deps.get_pricing_config)],
) -> PaymentOutcomeRead:
    charges = build_charges(payload.charges, config)
    outcome = payments_service.record_payment(
        charges,
        payload.amount,
        method=payload.method,
        current_status=payload.charges.payment_status,
    )
    return PaymentOutcomeRead.model_validate(outcome)


@router.post("/refund", response_model=PaymentOutcomeRead)
async def refund_booking_payment(
    payload: PaymentRefundRequest,
    config: Annotated[PricingSettings, Depends(deps.get_pricing_config)],
) -> PaymentOutcomeRead:
    charges = build_charges(payload.charges, config)
    outcome = payments_service.record_refund(
        charges,
        payload.amount,
        current_status=payload.charges.payment_status,
    )
    return PaymentOutcomeRead.model_validate(outcome)
