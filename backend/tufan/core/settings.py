"""Specialized settings adapters for the billing services."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from tufan.core.config import get_settings


class PricingSettings(BaseModel):
    """Slim view of pricing-related configuration."""

    default_vat_percentage: Decimal = Decimal("15")
    currency_symbol: str = "৳"


def get_pricing_settings() -> PricingSettings:
    """Return pricing-specific configuration."""

    settings = get_settings()
    return PricingSettings(
        default_vat_percentage=settings.default_vat_percentage,
        currency_symbol=settings.currency_symbol or "৳",
    )
