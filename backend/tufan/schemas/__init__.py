"""Schema exports."""

from tufan.schemas.booking_status import BookingStatusRead, BookingStatusRequest
from tufan.schemas.payments import (
    PaymentOutcomeRead,
    PaymentRecordRequest,
    PaymentRefundRequest,
)
from tufan.schemas.pricing import (
    BookingChargesInput,
    ConventionBaseRead,
    ConventionBaseRequest,
    PricingQuoteRead,
    RoomBaseRead,
    RoomBaseRequest,
)

__all__ = [
    "BookingChargesInput",
    "BookingStatusRead",
    "BookingStatusRequest",
    "ConventionBaseRead",
    "ConventionBaseRequest",
    "PaymentOutcomeRead",
    "PaymentRecordRequest",
    "PaymentRefundRequest",
    "PricingQuoteRead",
    "RoomBaseRead",
    "RoomBaseRequest",
]
