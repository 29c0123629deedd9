"""Pricing schema definitions."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from tufan.services.pricing_service import PaymentStatus

# Form fields arrive as whatever the dashboard typed; the pricing service
# coerces them, so the schema only has to accept them.
RawNumber = Decimal | float | int | str | None


class BookingChargesInput(BaseModel):
    """Raw booking charges as posted by the dashboard forms."""

    base_amount: RawNumber = Field(
        default=None, validation_alias=AliasChoices("base_amount", "baseAmount")
    )
    discount_type: str | None = Field(
        default=None, validation_alias=AliasChoices("discount_type", "discountType")
    )
    discount_percentage: RawNumber = Field(
        default=None,
        validation_alias=AliasChoices("discount_percentage", "discountPercentage"),
    )
    discount_amount: RawNumber = Field(
        default=None,
        validation_alias=AliasChoices("discount_amount", "discountAmount"),
    )
    extra_charges: RawNumber = Field(
        default=None, validation_alias=AliasChoices("extra_charges", "extraCharges")
    )
    vat_enabled: bool | str | None = Field(
        default=None, validation_alias=AliasChoices("vat_enabled", "vatEnabled")
    )
    vat_percentage: RawNumber = Field(
        default=None,
        validation_alias=AliasChoices("vat_percentage", "vatPercentage"),
    )
    vat_amount: RawNumber = Field(
        default=None, validation_alias=AliasChoices("vat_amount", "vatAmount")
    )
    advance_payment: RawNumber = Field(
        default=None,
        validation_alias=AliasChoices("advance_payment", "advancePayment"),
    )
    payment_status: PaymentStatus | None = Field(
        default=None,
        validation_alias=AliasChoices("payment_status", "paymentStatus"),
    )

    def form_fields(self) -> dict[str, Any]:
        """Return the raw charge fields keyed by their snake_case names."""

        return self.model_dump(exclude={"payment_status"})


class PricingQuoteRead(BaseModel):
    """Full price breakdown for a booking."""

    base_amount: Decimal
    discount: Decimal
    after_discount: Decimal
    extra_charges: Decimal
    vat_amount: Decimal
    grand_total: Decimal
    advance_payment: Decimal
    remaining_payment: Decimal
    payment_status: PaymentStatus

    model_config = ConfigDict(from_attributes=True)


class RoomBaseRequest(BaseModel):
    """Room rate and stay dates."""

    price_per_night: RawNumber = Field(
        default=None,
        validation_alias=AliasChoices("price_per_night", "pricePerNight"),
    )
    check_in: date | datetime = Field(
        validation_alias=AliasChoices("check_in", "checkInDate")
    )
    check_out: date | datetime = Field(
        validation_alias=AliasChoices("check_out", "checkOutDate")
    )


class RoomBaseRead(BaseModel):
    nights: int
    base_amount: Decimal


class ConventionBaseRequest(BaseModel):
    """Hall, food package and add-on selection for a convention booking."""

    hall_rent: RawNumber = Field(
        default=None, validation_alias=AliasChoices("hall_rent", "hallRent")
    )
    price_per_person: RawNumber = Field(
        default=None,
        validation_alias=AliasChoices("price_per_person", "pricePerPerson"),
    )
    number_of_guests: RawNumber = Field(
        default=None,
        validation_alias=AliasChoices("number_of_guests", "numberOfGuests"),
    )
    addon_prices: list[RawNumber] = Field(
        default_factory=list,
        validation_alias=AliasChoices("addon_prices", "addonPrices"),
    )


class ConventionBaseRead(BaseModel):
    hall_rent: Decimal
    food_cost: Decimal
    addons_cost: Decimal
    base_amount: Decimal

    model_config = ConfigDict(from_attributes=True)
