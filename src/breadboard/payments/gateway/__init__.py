"""Payment gateway factory.

Provides get_gateway() / set_gateway() to swap implementations. The default
is FakePaymentGateway, declining at the configured rate while fault
injection is enabled.
"""

from breadboard.config import get_settings
from breadboard.payments.gateway.fake_adapter import FakePaymentGateway
from breadboard.payments.gateway.port import PaymentGateway

_current_gateway: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    """Return the current payment gateway. Defaults to FakePaymentGateway."""
    global _current_gateway
    if _current_gateway is None:
        settings = get_settings()
        decline_rate = settings.payment_decline_rate if settings.faults_enabled else 0.0
        _current_gateway = FakePaymentGateway(decline_rate=decline_rate)
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    """Override the active payment gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to default gateway."""
    global _current_gateway
    _current_gateway = None
