"""Versioned API router."""

from fastapi import APIRouter

from . import bookings, health, payments, pricing

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(pricing.router)
router.include_router(payments.router)
router.include_router(bookings.router)

__all__ = ["router"]
