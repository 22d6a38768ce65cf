"""Payment gateway port (abstract interface).

Checkout creates an intent for the cart total, confirms it, and only then
places the order with the intent's client secret as its payment reference.
The order engine itself never talks to the gateway.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentIntent:
    client_secret: str
    amount: float
    currency: str = "usd"


@dataclass(frozen=True)
class PaymentConfirmation:
    success: bool
    failure_reason: str | None = None


class PaymentGateway(ABC):
    @abstractmethod
    def create_intent(self, amount: float, currency: str = "usd") -> PaymentIntent:
        """Reserve a payment for ``amount``."""

    @abstractmethod
    def confirm(self, client_secret: str) -> PaymentConfirmation:
        """Capture a previously created intent."""
