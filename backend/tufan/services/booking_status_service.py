"""Real-time status derivation for convention hall bookings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Any, Final

from tufan.reports.formatters import format_number
from tufan.services.pricing_service import PaymentStatus, normalize_amount

# Hour (24h clock) at which each time slot is over on the event day.
_SLOT_END_HOURS: Final[dict[str, int]] = {
    "morning": 12,
    "afternoon": 18,
    "evening": 23,
    "full-day": 23,
    "full day": 23,
}
_DEFAULT_SLOT_END_HOUR: Final = 23

PROGRAM_CANCELLED: Final = "cancelled"
PROGRAM_COMPLETED: Final = "completed"


@dataclass(frozen=True, slots=True)
class PaymentBadge:
    """Payment state as shown in the booking lists."""

    status: PaymentStatus
    display_text: str
    is_due: bool


def _to_date(value: date | datetime | str, tz: tzinfo | None = None) -> date:
    """Calendar day of ``value``; aware timestamps are read in ``tz``.

    ``tz=None`` means the server's local zone.
    """

    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def is_event_passed(
    event_date: date | datetime | str,
    time_slot: str | None,
    now: datetime | None = None,
) -> bool:
    """Whether the event's day and time slot are already over."""

    now = now or datetime.now()
    event_day = _to_date(event_date, now.tzinfo)
    today = now.date()
    if event_day < today:
        return True
    if event_day > today:
        return False
    slot = (time_slot or "").strip().lower()
    return now.hour >= _SLOT_END_HOURS.get(slot, _DEFAULT_SLOT_END_HOUR)


def real_time_program_status(
    program_status: str,
    event_date: date | datetime | str,
    time_slot: str | None,
    now: datetime | None = None,
) -> str:
    """Stored program status, promoted to completed once the event is over."""

    if program_status == PROGRAM_CANCELLED:
        return PROGRAM_CANCELLED
    if is_event_passed(event_date, time_slot, now):
        return PROGRAM_COMPLETED
    return program_status


def real_time_payment_status(
    remaining_payment: Any, payment_status: PaymentStatus | str | None
) -> PaymentBadge:
    """Payment badge that flags any outstanding balance as due."""

    remaining = normalize_amount(remaining_payment)
    if remaining <= 0:
        return PaymentBadge(status=PaymentStatus.PAID, display_text="Paid", is_due=False)

    stored = str(getattr(payment_status, "value", payment_status) or "")
    if stored == PaymentStatus.PARTIAL.value:
        return PaymentBadge(
            status=PaymentStatus.PARTIAL, display_text="Partial (Due)", is_due=True
        )
    return PaymentBadge(
        status=PaymentStatus.PENDING, display_text="Pending (Due)", is_due=True
    )


def format_payment_due(remaining_payment: Any, currency_symbol: str = "৳") -> str:
    """Remaining balance with a Paid or DUE marker, e.g. ``৳12,500 (DUE)``."""

    remaining = normalize_amount(remaining_payment)
    if remaining <= 0:
        return f"{currency_symbol}0 (Paid)"
    return f"{currency_symbol}{format_number(remaining)} (DUE)"


__all__ = [
    "PaymentBadge",
    "format_payment_due",
    "is_event_passed",
    "real_time_payment_status",
    "real_time_program_status",
]
