"""Identity API package."""

from breadboard.identity.api.routes import address_router, auth_router

__all__ = ["auth_router", "address_router"]
