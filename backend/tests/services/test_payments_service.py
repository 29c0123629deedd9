"""Tests for payment and refund recording rules."""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal

import pytest

from tufan.services import payments_service
from tufan.services.payments_service import PaymentMethod
from tufan.services.pricing_service import BookingCharges, PaymentStatus


def test_payment_within_balance_is_recorded(resort_booking: BookingCharges) -> None:
    outcome = payments_service.record_payment(
        resort_booking, "1250", method=PaymentMethod.MFS
    )

    assert outcome.accepted is True
    assert outcome.reason is None
    assert outcome.advance_payment == Decimal("3250.00")
    assert outcome.remaining_payment == Decimal("2000.00")
    assert outcome.payment_status is PaymentStatus.PARTIAL
    assert outcome.method is PaymentMethod.MFS


def test_payment_settling_balance_marks_paid(resort_booking: BookingCharges) -> None:
    outcome = payments_service.record_payment(resort_booking, 3250)

    assert outcome.accepted is True
    assert outcome.remaining_payment == Decimal("0.00")
    assert outcome.payment_status is PaymentStatus.PAID


@pytest.mark.parametrize("amount", [0, -100, "", None, "abc"])
def test_non_positive_payment_is_rejected(
    resort_booking: BookingCharges, amount
) -> None:
    outcome = payments_service.record_payment(resort_booking, amount)

    assert outcome.accepted is False
    assert outcome.reason == "Enter a valid payment amount"
    assert outcome.advance_payment == Decimal("2000.00")
    assert outcome.payment_status is PaymentStatus.PARTIAL


def test_payment_above_remaining_balance_is_rejected(
    resort_booking: BookingCharges,
) -> None:
    outcome = payments_service.record_payment(resort_booking, "3250.01")

    assert outcome.accepted is False
    assert "3250.00" in (outcome.reason or "")
    assert outcome.advance_payment == Decimal("2000.00")
    assert outcome.remaining_payment == Decimal("3250.00")


def test_payment_after_refund_lifts_refunded_status(
    resort_booking: BookingCharges,
) -> None:
    refunded = replace(resort_booking, advance_payment=Decimal("0"))

    outcome = payments_service.record_payment(
        refunded, 1000, current_status=PaymentStatus.REFUNDED
    )

    assert outcome.accepted is True
    assert outcome.payment_status is PaymentStatus.PARTIAL


def test_refund_exceeding_advance_is_rejected() -> None:
    charges = BookingCharges(
        base_amount=Decimal("5000"), advance_payment=Decimal("1000")
    )

    outcome = payments_service.record_refund(charges, 1500)

    assert outcome.accepted is False
    assert outcome.reason == "Refund exceeds the advance payment of 1000.00"
    assert outcome.advance_payment == Decimal("1000.00")


@pytest.mark.parametrize("amount", [0, "-1", "n/a"])
def test_non_positive_refund_is_rejected(
    resort_booking: BookingCharges, amount
) -> None:
    outcome = payments_service.record_refund(resort_booking, amount)

    assert outcome.accepted is False
    assert outcome.reason == "Enter a valid refund amount"


def test_partial_refund_keeps_partial_status(resort_booking: BookingCharges) -> None:
    outcome = payments_service.record_refund(resort_booking, 500)

    assert outcome.accepted is True
    assert outcome.advance_payment == Decimal("1500.00")
    assert outcome.remaining_payment == Decimal("3750.00")
    assert outcome.payment_status is PaymentStatus.PARTIAL


def test_full_refund_marks_refunded(resort_booking: BookingCharges) -> None:
    outcome = payments_service.record_refund(resort_booking, "2000")

    assert outcome.accepted is True
    assert outcome.advance_payment == Decimal("0.00")
    assert outcome.remaining_payment == Decimal("5250.00")
    assert outcome.payment_status is PaymentStatus.REFUNDED


def test_rejections_are_logged(
    resort_booking: BookingCharges, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="tufan.services.payments_service"):
        payments_service.record_refund(resort_booking, 999999)

    assert "Refund exceeds the advance payment" in caplog.text


def test_outcome_serializes_to_strings(resort_booking: BookingCharges) -> None:
    data = payments_service.record_payment(resort_booking, 250).to_dict()

    assert data == {
        "accepted": True,
        "reason": None,
        "amount": "250.00",
        "advance_payment": "2250.00",
        "remaining_payment": "3000.00",
        "payment_status": "partial",
        "method": "cash",
    }
