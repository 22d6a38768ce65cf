"""Payment steps of the checkout flow."""

from breadboard.errors import PaymentDeclined
from breadboard.payments.gateway import get_gateway
from breadboard.payments.gateway.port import PaymentIntent
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)


def create_payment_intent(amount: float, currency: str = "usd") -> PaymentIntent:
    intent = get_gateway().create_intent(amount, currency)
    logger.info("payment_intent_created", amount=intent.amount, currency=intent.currency)
    return intent


def confirm_payment(client_secret: str) -> str:
    """Confirm an intent; returns the reference to store on the order."""
    confirmation = get_gateway().confirm(client_secret)
    if not confirmation.success:
        logger.warning("payment_declined", reason=confirmation.failure_reason)
        raise PaymentDeclined(reason=confirmation.failure_reason)

    logger.info("payment_confirmed")
    return client_secret
