"""Pricing engine for room and convention hall bookings."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

MONEY_PLACES = Decimal("0.01")
_ZERO = Decimal("0.00")
_HUNDRED = Decimal("100")
# Larger form values are typing mistakes; treated like any other garbage.
MAX_AMOUNT = Decimal("1e15")
# Bound for totals derived from in-range inputs.
_MAX_DERIVED = Decimal("1e30")
_TRUE_VALUES = {"1", "true", "yes", "on"}


class DiscountType(str, enum.Enum):
    """How a booking discount is expressed."""

    NONE = "none"
    PERCENTAGE = "percentage"
    FLAT = "flat"

    @classmethod
    def parse(cls, value: Any) -> "DiscountType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NONE


class PaymentStatus(str, enum.Enum):
    """Lifecycle states for a booking's payment."""

    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"
    REFUNDED = "refunded"


def _to_money(value: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 50
        return value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def _to_str(value: Decimal) -> str:
    return f"{_to_money(value):.2f}"


def _to_decimal(value: Any, ceiling: Decimal = MAX_AMOUNT) -> Decimal:
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return _ZERO
    if isinstance(value, float):
        value = repr(value)
    try:
        number = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return _ZERO
    if not number.is_finite() or number < 0 or number > ceiling:
        return _ZERO
    return number


def parse_amount(value: Any) -> Decimal:
    """Coerce a raw form value into a non-negative money amount.

    Anything that is not a finite, non-negative number becomes ``0.00``.
    """

    return _to_money(_to_decimal(value))


def normalize_amount(value: Any) -> Decimal:
    """Quantize an already computed amount such as a grand total.

    Unlike ``parse_amount`` this does not apply the form input ceiling, so
    totals and cumulative payments above ``MAX_AMOUNT`` survive.
    """

    return _to_money(_to_decimal(value, _MAX_DERIVED))


def parse_percentage(value: Any) -> Decimal:
    """Coerce a raw form value into a percentage within ``[0, 100]``."""

    return min(_to_decimal(value), _HUNDRED)


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_VALUES


@dataclass(frozen=True, slots=True)
class BookingCharges:
    """Inputs of a single booking price calculation."""

    base_amount: Decimal = _ZERO
    discount_type: DiscountType = DiscountType.NONE
    discount_percentage: Decimal = _ZERO
    discount_amount: Decimal = _ZERO
    extra_charges: Decimal = _ZERO
    vat_enabled: bool = False
    vat_percentage: Decimal | None = None
    vat_amount: Decimal = _ZERO
    advance_payment: Decimal = _ZERO

    @classmethod
    def from_form(
        cls,
        data: Mapping[str, Any],
        *,
        default_vat_percentage: Decimal | None = None,
    ) -> "BookingCharges":
        """Build charges from raw dashboard form fields.

        Keys may be snake_case or the camelCase names the dashboard posts.
        When VAT is enabled but neither a percentage nor an amount is given,
        ``default_vat_percentage`` applies.
        """

        def _get(name: str) -> Any:
            if name in data:
                return data[name]
            head, *rest = name.split("_")
            return data.get(head + "".join(part.title() for part in rest))

        vat_enabled = parse_flag(_get("vat_enabled"))
        raw_vat_percentage = _get("vat_percentage")
        raw_vat_amount = _get("vat_amount")
        vat_percentage: Decimal | None = None
        if raw_vat_percentage is not None and str(raw_vat_percentage).strip():
            vat_percentage = parse_percentage(raw_vat_percentage)
        elif (
            vat_enabled
            and default_vat_percentage is not None
            and (raw_vat_amount is None or not str(raw_vat_amount).strip())
        ):
            vat_percentage = parse_percentage(default_vat_percentage)

        return cls(
            base_amount=parse_amount(_get("base_amount")),
            discount_type=DiscountType.parse(_get("discount_type")),
            discount_percentage=parse_percentage(_get("discount_percentage")),
            discount_amount=parse_amount(_get("discount_amount")),
            extra_charges=parse_amount(_get("extra_charges")),
            vat_enabled=vat_enabled,
            vat_percentage=vat_percentage,
            vat_amount=parse_amount(raw_vat_amount),
            advance_payment=parse_amount(_get("advance_payment")),
        )


@dataclass(slots=True)
class PricingQuote:
    """Aggregate pricing output for a booking."""

    base_amount: Decimal
    discount: Decimal
    after_discount: Decimal
    extra_charges: Decimal
    vat_amount: Decimal
    grand_total: Decimal
    advance_payment: Decimal
    remaining_payment: Decimal
    payment_status: PaymentStatus

    def to_dict(self) -> dict[str, str]:
        """Serialize the quote to plain types for responses."""

        return {
            "base_amount": _to_str(self.base_amount),
            "discount": _to_str(self.discount),
            "after_discount": _to_str(self.after_discount),
            "extra_charges": _to_str(self.extra_charges),
            "vat_amount": _to_str(self.vat_amount),
            "grand_total": _to_str(self.grand_total),
            "advance_payment": _to_str(self.advance_payment),
            "remaining_payment": _to_str(self.remaining_payment),
            "payment_status": self.payment_status.value,
        }


@dataclass(slots=True)
class ConventionCharges:
    """Base amount breakdown of a convention hall booking."""

    hall_rent: Decimal
    food_cost: Decimal
    addons_cost: Decimal
    base_amount: Decimal


def compute_discount(
    base_amount: Any,
    discount_type: Any,
    discount_percentage: Any = None,
    discount_amount: Any = None,
) -> Decimal:
    """Return the discount for ``base_amount``, never exceeding it."""

    base = parse_amount(base_amount)
    kind = DiscountType.parse(discount_type)
    if kind is DiscountType.PERCENTAGE:
        percent = parse_percentage(discount_percentage)
        return min(_to_money(base * percent / _HUNDRED), base)
    if kind is DiscountType.FLAT:
        return min(parse_amount(discount_amount), base)
    return _ZERO


def compute_vat_amount(charges: BookingCharges) -> Decimal:
    """Return the VAT owed on the discounted amount.

    ``vat_percentage`` wins over the precomputed ``vat_amount``; the latter
    is only honoured when no percentage is known.
    """

    if not charges.vat_enabled:
        return _ZERO
    if charges.vat_percentage is None:
        return parse_amount(charges.vat_amount)
    after_discount = _after_discount(charges)
    percent = parse_percentage(charges.vat_percentage)
    return _to_money(after_discount * percent / _HUNDRED)


def _after_discount(charges: BookingCharges) -> Decimal:
    base = parse_amount(charges.base_amount)
    discount = compute_discount(
        base,
        charges.discount_type,
        charges.discount_percentage,
        charges.discount_amount,
    )
    return base - discount


def compute_grand_total(charges: BookingCharges) -> Decimal:
    """Discounted base plus extra charges and VAT, floored at zero."""

    total = (
        _after_discount(charges)
        + parse_amount(charges.extra_charges)
        + compute_vat_amount(charges)
    )
    return _to_money(max(total, _ZERO))


def compute_remaining_payment(charges: BookingCharges) -> Decimal:
    """Balance still owed after the advance payment, never negative."""

    advance = normalize_amount(charges.advance_payment)
    remaining = compute_grand_total(charges) - advance
    return _to_money(max(remaining, _ZERO))


def derive_payment_status(
    advance_payment: Any,
    grand_total: Any,
    current_status: PaymentStatus | str | None = None,
) -> PaymentStatus:
    """Payment status implied by the amount paid against the total."""

    if current_status is not None and str(
        getattr(current_status, "value", current_status)
    ) == PaymentStatus.REFUNDED.value:
        return PaymentStatus.REFUNDED

    paid = normalize_amount(advance_payment)
    total = normalize_amount(grand_total)
    if paid <= 0:
        return PaymentStatus.PENDING
    if paid < total:
        return PaymentStatus.PARTIAL
    return PaymentStatus.PAID


def quote_booking(
    charges: BookingCharges,
    *,
    current_status: PaymentStatus | str | None = None,
) -> PricingQuote:
    """Produce the full price breakdown for a booking."""

    base = parse_amount(charges.base_amount)
    discount = compute_discount(
        base,
        charges.discount_type,
        charges.discount_percentage,
        charges.discount_amount,
    )
    grand_total = compute_grand_total(charges)
    advance = normalize_amount(charges.advance_payment)
    return PricingQuote(
        base_amount=base,
        discount=discount,
        after_discount=base - discount,
        extra_charges=parse_amount(charges.extra_charges),
        vat_amount=compute_vat_amount(charges),
        grand_total=grand_total,
        advance_payment=advance,
        remaining_payment=compute_remaining_payment(charges),
        payment_status=derive_payment_status(advance, grand_total, current_status),
    )


def _to_datetime(value: date | datetime | str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return _to_datetime(datetime.fromisoformat(str(value).strip()))


def calculate_nights(
    check_in: date | datetime | str, check_out: date | datetime | str
) -> int:
    """Whole nights between check-in and check-out, rounded up.

    Raises ``ValueError`` for strings that are not ISO dates.
    """

    delta = _to_datetime(check_out) - _to_datetime(check_in)
    nights = math.ceil(delta.total_seconds() / 86400)
    return max(0, nights)


def room_base_amount(
    price_per_night: Any,
    check_in: date | datetime | str,
    check_out: date | datetime | str,
) -> Decimal:
    """Room rent for the stay; zero when the dates do not span a night."""

    nights = calculate_nights(check_in, check_out)
    if nights <= 0:
        return _ZERO
    return _to_money(parse_amount(price_per_night) * nights)


def convention_base_amount(
    hall_rent: Any,
    price_per_person: Any,
    number_of_guests: Any,
    addon_prices: Iterable[Any] = (),
) -> ConventionCharges:
    """Hall rent plus food for every guest plus the selected add-ons."""

    rent = parse_amount(hall_rent)
    guests = int(_to_decimal(number_of_guests))
    food_cost = _to_money(parse_amount(price_per_person) * guests)
    addons_cost = sum((parse_amount(price) for price in addon_prices), _ZERO)
    return ConventionCharges(
        hall_rent=rent,
        food_cost=food_cost,
        addons_cost=_to_money(addons_cost),
        base_amount=_to_money(rent + food_cost + addons_cost),
    )


__all__ = [
    "BookingCharges",
    "ConventionCharges",
    "DiscountType",
    "MONEY_PLACES",
    "PaymentStatus",
    "PricingQuote",
    "calculate_nights",
    "compute_discount",
    "compute_grand_total",
    "compute_remaining_payment",
    "compute_vat_amount",
    "convention_base_amount",
    "derive_payment_status",
    "normalize_amount",
    "parse_amount",
    "parse_flag",
    "parse_percentage",
    "quote_booking",
    "room_base_amount",
]
