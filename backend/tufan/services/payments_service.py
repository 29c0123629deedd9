"""Validation rules for recording booking payments and refunds."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from tufan.services.pricing_service import (
    BookingCharges,
    PaymentStatus,
    compute_grand_total,
    compute_remaining_payment,
    derive_payment_status,
    normalize_amount,
    parse_amount,
)

logger = logging.getLogger(__name__)


class PaymentMethod(str, enum.Enum):
    """Ways a guest can settle a booking."""

    CASH = "cash"
    CARD = "card"
    MFS = "mfs"


@dataclass(frozen=True, slots=True)
class PaymentOutcome:
    """Result of a payment or refund request against a booking."""

    accepted: bool
    amount: Decimal
    advance_payment: Decimal
    remaining_payment: Decimal
    payment_status: PaymentStatus
    reason: str | None = None
    method: PaymentMethod | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the outcome to plain types for responses."""

        return {
            "accepted": self.accepted,
            "reason": self.reason,
            "amount": f"{self.amount:.2f}",
            "advance_payment": f"{self.advance_payment:.2f}",
            "remaining_payment": f"{self.remaining_payment:.2f}",
            "payment_status": self.payment_status.value,
            "method": self.method.value if self.method else None,
        }


def _rejected(
    charges: BookingCharges,
    amount: Decimal,
    status: PaymentStatus,
    reason: str,
    method: PaymentMethod | None = None,
) -> PaymentOutcome:
    logger.info("Rejected booking payment action: %s (amount=%s)", reason, amount)
    return PaymentOutcome(
        accepted=False,
        amount=amount,
        advance_payment=normalize_amount(charges.advance_payment),
        remaining_payment=compute_remaining_payment(charges),
        payment_status=status,
        reason=reason,
        method=method,
    )


def record_payment(
    charges: BookingCharges,
    amount: Any,
    *,
    method: PaymentMethod | str = PaymentMethod.CASH,
    current_status: PaymentStatus | str | None = None,
) -> PaymentOutcome:
    """Apply a payment to the booking if it is within the remaining balance."""

    payment_method = PaymentMethod(method)
    value = parse_amount(amount)
    grand_total = compute_grand_total(charges)
    status = derive_payment_status(
        charges.advance_payment, grand_total, current_status
    )

    if value <= 0:
        return _rejected(
            charges, value, status, "Enter a valid payment amount", payment_method
        )
    remaining = compute_remaining_payment(charges)
    if value > remaining:
        return _rejected(
            charges,
            value,
            status,
            f"Payment exceeds the remaining balance of {remaining:.2f}",
            payment_method,
        )

    updated = replace(
        charges, advance_payment=normalize_amount(charges.advance_payment) + value
    )
    # A fresh payment lifts a previous refund marker.
    new_status = derive_payment_status(updated.advance_payment, grand_total)
    logger.info(
        "Recorded %s payment of %s; status now %s",
        payment_method.value,
        value,
        new_status.value,
    )
    return PaymentOutcome(
        accepted=True,
        amount=value,
        advance_payment=updated.advance_payment,
        remaining_payment=compute_remaining_payment(updated),
        payment_status=new_status,
        method=payment_method,
    )


def record_refund(
    charges: BookingCharges,
    amount: Any,
    *,
    current_status: PaymentStatus | str | None = None,
) -> PaymentOutcome:
    """Return part or all of the advance payment to the guest."""

    value = parse_amount(amount)
    advance = normalize_amount(charges.advance_payment)
    status = derive_payment_status(
        advance, compute_grand_total(charges), current_status
    )

    if value <= 0:
        return _rejected(charges, value, status, "Enter a valid refund amount")
    if value > advance:
        return _rejected(
            charges,
            value,
            status,
            f"Refund exceeds the advance payment of {advance:.2f}",
        )

    updated = replace(charges, advance_payment=advance - value)
    new_status = (
        PaymentStatus.REFUNDED
        if updated.advance_payment <= 0
        else PaymentStatus.PARTIAL
    )
    logger.info("Recorded refund of %s; status now %s", value, new_status.value)
    return PaymentOutcome(
        accepted=True,
        amount=value,
        advance_payment=updated.advance_payment,
        remaining_payment=compute_remaining_payment(updated),
        payment_status=new_status,
    )


__all__ = [
    "PaymentMethod",
    "PaymentOutcome",
    "record_payment",
    "record_refund",
]
