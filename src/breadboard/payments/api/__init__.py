"""Payments API package."""

from breadboard.payments.api.routes import router

__all__ = ["router"]
