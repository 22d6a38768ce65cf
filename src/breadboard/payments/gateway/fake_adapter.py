"""Configurable fake payment gateway for development and testing.

No external calls are made. Only intents this gateway issued can be
confirmed, each exactly once. Confirmations succeed unless the gateway has
been configured to decline, or a random draw falls under ``decline_rate``.
"""

import random
from collections import OrderedDict, deque
from uuid import uuid4

from breadboard.payments.gateway.port import PaymentConfirmation, PaymentGateway, PaymentIntent
from breadboard.shared.pricing import round2

DECLINED = "Card declined"
UNKNOWN_INTENT = "Unknown payment intent"

# Oldest unconfirmed intents are forgotten past this many
MAX_PENDING_INTENTS = 10_000
CALL_HISTORY = 100


class FakePaymentGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(
        self,
        decline_rate: float = 0.0,
        rng: random.Random | None = None,
        max_pending: int = MAX_PENDING_INTENTS,
    ) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = DECLINED
        self.decline_rate = decline_rate
        self.rng = rng or random.Random()
        self.max_pending = max_pending
        self.calls: deque[dict] = deque(maxlen=CALL_HISTORY)
        self.intents: OrderedDict[str, PaymentIntent] = OrderedDict()

    def configure(self, should_succeed: bool, failure_reason: str = DECLINED) -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_intent(self, amount: float, currency: str = "usd") -> PaymentIntent:
        self.calls.append({"method": "create_intent", "amount": amount, "currency": currency})

        intent = PaymentIntent(client_secret=f"pi_{uuid4().hex[:16]}", amount=round2(amount), currency=currency)
        self.intents[intent.client_secret] = intent
        while len(self.intents) > self.max_pending:
            self.intents.popitem(last=False)
        return intent

    def confirm(self, client_secret: str) -> PaymentConfirmation:
        self.calls.append({"method": "confirm", "client_secret": client_secret})

        if self.intents.pop(client_secret, None) is None:
            return PaymentConfirmation(success=False, failure_reason=UNKNOWN_INTENT)
        if not self.should_succeed:
            return PaymentConfirmation(success=False, failure_reason=self.failure_reason)
        if self.decline_rate and self.rng.random() < self.decline_rate:
            return PaymentConfirmation(success=False, failure_reason=DECLINED)
        return PaymentConfirmation(success=True)
