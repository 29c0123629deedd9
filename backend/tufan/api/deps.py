"""Common API dependencies."""

from __future__ import annotations

from tufan.core.settings import PricingSettings, get_pricing_settings


def get_pricing_config() -> PricingSettings:
    """Provide pricing configuration to request handlers."""
    return get_pricing_settings()
