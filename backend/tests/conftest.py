"""Test fixtures for the Tufan Resort billing backend."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEFAULT_VAT_PERCENTAGE", "15")

from tufan.core.config import get_settings
from tufan.main import app
from tufan.services.pricing_service import BookingCharges, DiscountType


@pytest.fixture(autouse=True)
def fresh_settings() -> None:
    """Drop cached settings so environment tweaks apply per test."""
    get_settings.cache_clear()


@pytest.fixture()
def resort_booking() -> BookingCharges:
    """Five-night room booking with a 10% discount, extras and VAT."""
    return BookingCharges(
        base_amount=Decimal("5000.00"),
        discount_type=DiscountType.PERCENTAGE,
        discount_percentage=Decimal("10"),
        extra_charges=Decimal("300.00"),
        vat_enabled=True,
        vat_amount=Decimal("450.00"),
        advance_payment=Decimal("2000.00"),
    )


@pytest_asyncio.fixture()
async def client() -> AsyncIterator[AsyncClient]:
    """Yield an async client bound to the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
