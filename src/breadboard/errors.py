"""Error taxonomy for breadboard.

Every failure the storefront surfaces carries a stable ``code`` that callers
map to user-facing messages and retry policy. ``transient`` errors may be
retried with backoff by the caller; the core never retries on its own.
"""

from typing import Any


class BreadboardError(Exception):
    """Base exception for all breadboard errors."""

    code = "ERROR"
    status_code = 400
    transient = False
    default_message = "Request failed"

    def __init__(self, message: str | None = None, **details: Any):
        self.message = message or self.default_message
        self.details = {key: value for key, value in details.items() if value is not None}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "details": self.details,
            "transient": self.transient,
        }


# --- Authentication ---


class AuthRequired(BreadboardError):
    """Raised when an operation needs an authenticated user and none is known."""

    code = "AUTH_REQUIRED"
    status_code = 401
    default_message = "Authentication required"


class AuthFailed(BreadboardError):
    """Base for rejected authentication attempts."""

    status_code = 401


class InvalidCredentials(AuthFailed):
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class InvalidOtp(AuthFailed):
    code = "INVALID_OTP"
    status_code = 400
    default_message = "Invalid OTP"


class InvalidToken(AuthFailed):
    code = "INVALID_TOKEN"
    default_message = "Invalid refresh token"


# --- Transient upstream failures ---


class RateLimited(BreadboardError):
    code = "RATE_LIMIT"
    status_code = 429
    transient = True
    default_message = "Too many requests"


class ServerError(BreadboardError):
    code = "SERVER_ERROR"
    status_code = 503
    transient = True
    default_message = "Internal server error"


class PaymentError(ServerError):
    code = "PAYMENT_ERROR"
    default_message = "Payment service unavailable"


# --- Missing entities ---


class NotFound(BreadboardError):
    status_code = 404
    default_message = "Not found"


class ProductNotFound(NotFound):
    code = "PRODUCT_NOT_FOUND"
    default_message = "Product not found"


class OrderNotFound(NotFound):
    code = "ORDER_NOT_FOUND"
    default_message = "Order not found"


class AddressNotFound(NotFound):
    code = "ADDRESS_NOT_FOUND"
    default_message = "Delivery address not found"


class UserNotFound(NotFound):
    code = "USER_NOT_FOUND"
    default_message = "User not found"


# --- Business rule violations ---


class ValidationFailed(BreadboardError):
    """Caller input or current state violates a business rule."""

    status_code = 422
    default_message = "Validation failed"

    @property
    def suggested(self) -> int | None:
        return self.details.get("suggested")


class MinQtyNotMet(ValidationFailed):
    code = "MIN_QTY_NOT_MET"


class InvalidIncrement(ValidationFailed):
    code = "INVALID_INCREMENT"


class InsufficientInventory(ValidationFailed):
    code = "INSUFFICIENT_INVENTORY"


class CartInvalid(ValidationFailed):
    code = "CART_INVALID"


class EmptyCart(ValidationFailed):
    code = "EMPTY_CART"
    default_message = "Cart is empty"


# --- Conflicts ---


class Conflict(BreadboardError):
    status_code = 409


class UserExists(Conflict):
    code = "USER_EXISTS"
    default_message = "User already exists"


# --- Payment ---


class PaymentDeclined(BreadboardError):
    code = "PAYMENT_DECLINED"
    status_code = 402
    default_message = "Payment failed - card declined"
