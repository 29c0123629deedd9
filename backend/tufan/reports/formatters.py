"""Number, currency and date formatting for receipts and reports."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

_CENTS = Decimal("0.01")
_MAX_NUMBER = Decimal("1e30")


def _number_or_zero(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, float):
        value = repr(value)
    try:
        number = Decimal(str(value).strip() or "0")
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not number.is_finite() or abs(number) > _MAX_NUMBER:
        return Decimal("0")
    return number


def _quantize(value: Decimal, places: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 50
        return value.quantize(places, rounding=ROUND_HALF_UP)


def round_currency(value: Any) -> Decimal:
    """Round to two decimal places, half up."""

    return _quantize(_number_or_zero(value), _CENTS)


def format_number(value: Any) -> str:
    """Thousand-separated number with at most three fraction digits.

    >>> format_number(1500)
    '1,500'
    >>> format_number("2500.50")
    '2,500.5'
    """

    number = _quantize(_number_or_zero(value), Decimal("0.001"))
    if number == number.to_integral_value():
        return f"{int(number):,}"
    text = f"{number:,f}".rstrip("0")
    return text.rstrip(".")


def format_currency(value: Any, currency_symbol: str = "৳") -> str:
    """Amount prefixed with the currency symbol, e.g. ``৳1,500``."""

    return f"{currency_symbol}{format_number(value)}"


def format_percentage(value: Any) -> str:
    number = _number_or_zero(value).normalize()
    text = f"{number:f}"
    return f"{text}%"


def format_date(value: date | datetime | str) -> str:
    """DD/MM/YYYY rendering used on printed receipts."""

    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    return value.strftime("%d/%m/%Y")


def is_valid_amount(value: Any) -> bool:
    """True for finite numbers that are zero or positive."""

    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, float):
        value = repr(value)
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return False
    return number.is_finite() and number >= 0


__all__ = [
    "format_currency",
    "format_date",
    "format_number",
    "format_percentage",
    "is_valid_amount",
    "round_currency",
]
