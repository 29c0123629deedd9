"""Tests for real-time convention booking status."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from tufan.services import booking_status_service
from tufan.services.pricing_service import PaymentStatus

EVENT_DAY = date(2025, 6, 14)


@pytest.mark.parametrize(
    ("slot", "hour", "passed"),
    [
        ("morning", 11, False),
        ("morning", 12, True),
        ("Afternoon", 17, False),
        ("afternoon", 18, True),
        ("evening", 22, False),
        ("evening", 23, True),
        ("full-day", 23, True),
        ("Full Day", 20, False),
        ("brunch", 23, True),
        (None, 10, False),
    ],
)
def test_event_day_uses_slot_end_hour(slot, hour: int, passed: bool) -> None:
    now = datetime(2025, 6, 14, hour, 30)
    assert booking_status_service.is_event_passed(EVENT_DAY, slot, now) is passed


def test_past_and_future_days() -> None:
    now = datetime(2025, 6, 14, 9)
    assert booking_status_service.is_event_passed("2025-06-13", "evening", now)
    assert not booking_status_service.is_event_passed("2025-06-15", "morning", now)


def test_cancelled_program_stays_cancelled() -> None:
    now = datetime(2025, 7, 1)
    status = booking_status_service.real_time_program_status(
        "cancelled", EVENT_DAY, "morning", now
    )
    assert status == "cancelled"


def test_passed_program_reads_completed() -> None:
    now = datetime(2025, 7, 1)
    status = booking_status_service.real_time_program_status(
        "confirmed", EVENT_DAY, "morning", now
    )
    assert status == "completed"


def test_upcoming_program_keeps_stored_status() -> None:
    now = datetime(2025, 6, 1)
    status = booking_status_service.real_time_program_status(
        "confirmed", EVENT_DAY, "evening", now
    )
    assert status == "confirmed"


def test_payment_badge_paid_when_nothing_remains() -> None:
    badge = booking_status_service.real_time_payment_status(0, "partial")
    assert badge.status is PaymentStatus.PAID
    assert badge.display_text == "Paid"
    assert badge.is_due is False


def test_payment_badge_partial_due() -> None:
    badge = booking_status_service.real_time_payment_status(
        "12500", PaymentStatus.PARTIAL
    )
    assert badge.status is PaymentStatus.PARTIAL
    assert badge.display_text == "Partial (Due)"
    assert badge.is_due is True


def test_payment_badge_pending_due() -> None:
    badge = booking_status_service.real_time_payment_status(800, "pending")
    assert badge.status is PaymentStatus.PENDING
    assert badge.display_text == "Pending (Due)"
    assert badge.is_due is True


def test_format_payment_due() -> None:
    assert booking_status_service.format_payment_due(0) == "৳0 (Paid)"
    assert booking_status_service.format_payment_due("12500") == "৳12,500 (DUE)"


def test_utc_timestamp_is_read_on_the_local_event_day() -> None:
    dhaka = timezone(timedelta(hours=6))
    now = datetime(2025, 6, 14, 10, tzinfo=dhaka)

    # 18:30 UTC on the 13th is 00:30 on the 14th in Dhaka.
    assert not booking_status_service.is_event_passed(
        "2025-06-13T18:30:00.000Z", "evening", now
    )
    assert booking_status_service.is_event_passed(
        "2025-06-13T17:30:00.000Z", "evening", now
    )


def test_format_payment_due_with_large_balance() -> None:
    assert (
        booking_status_service.format_payment_due("2000000000000000")
        == "৳2,000,000,000,000,000 (DUE)"
    )
