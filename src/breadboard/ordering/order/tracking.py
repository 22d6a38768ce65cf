"""Order tracking with simulated fulfilment progress.

Reading an order stands in for a fulfilment feed: on every read of a
non-terminal order the simulator draws a number, and a draw below the
progression probability advances the order exactly one step.
"""

import random

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from breadboard.config import get_settings
from breadboard.domain import breadboard
from breadboard.identity.access import require_user
from breadboard.ordering.order.order import Order
from breadboard.ordering.order.queries import find_order
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)


class FulfillmentSimulator:
    """Decides whether a read advances an order.

    ``probability`` of None means the configured progression probability.
    """

    def __init__(self, rng: random.Random | None = None, probability: float | None = None) -> None:
        self.rng = rng or random.Random()
        self.probability = probability

    def should_advance(self) -> bool:
        probability = self.probability
        if probability is None:
            probability = get_settings().progression_probability
        return self.rng.random() < probability


_current_simulator: FulfillmentSimulator | None = None


def get_simulator() -> FulfillmentSimulator:
    global _current_simulator
    if _current_simulator is None:
        _current_simulator = FulfillmentSimulator()
    return _current_simulator


def set_simulator(simulator: FulfillmentSimulator) -> None:
    """Override the active simulator (useful for tests)."""
    global _current_simulator
    _current_simulator = simulator


def reset_simulator() -> None:
    global _current_simulator
    _current_simulator = None


@breadboard.command(part_of="Order")
class TrackOrder:
    user_id = Identifier(required=True)
    order_id = Identifier(required=True)


@breadboard.command_handler(part_of=Order)
class TrackOrderHandler:
    @handle(TrackOrder)
    def track_order(self, command):
        require_user(command.user_id)
        order = find_order(command.user_id, command.order_id)

        if not order.is_terminal and get_simulator().should_advance():
            previous = order.status
            order.advance_status()
            current_domain.repository_for(Order).add(order)
            logger.info(
                "order_status_advanced",
                order_number=order.order_number,
                previous_status=previous,
                new_status=order.status,
            )

        return order
