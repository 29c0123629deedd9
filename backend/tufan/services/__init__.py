"""Service layer exports."""
from tufan.services import (
    booking_status_service,
    payments_service,
    pricing_service,
)

__all__ = [
    "booking_status_service",
    "payments_service",
    "pricing_service",
]
