"""Order Engine entry points.

Placement holds the user's lock and the order number lock across the whole
unit of work; reorder rewrites the cart and so holds the user's lock.
"""

from protean.utils.globals import current_domain

from breadboard.errors import AuthRequired
from breadboard.ordering.cart.cart import ShoppingCart
from breadboard.ordering.order.order import Order
from breadboard.ordering.order.placement import PlaceOrder
from breadboard.ordering.order.queries import list_orders
from breadboard.ordering.order.reorder import Reorder
from breadboard.ordering.order.tracking import TrackOrder
from breadboard.shared.locks import order_number_lock, user_locks

__all__ = ["get_order", "list_orders", "place_order", "reorder"]


def place_order(
    user_id,
    delivery_address_id,
    requested_date=None,
    po_number=None,
    notes=None,
    payment_reference=None,
) -> Order:
    if not user_id:
        raise AuthRequired()

    command = PlaceOrder(
        user_id=user_id,
        delivery_address_id=delivery_address_id,
        requested_date=requested_date,
        po_number=po_number,
        notes=notes,
        payment_reference=payment_reference,
    )
    with user_locks.hold(user_id), order_number_lock:
        return current_domain.process(command, asynchronous=False)


def get_order(user_id, order_id) -> Order:
    """Fetch an order; may advance its status one step."""
    if not user_id:
        raise AuthRequired()
    return current_domain.process(TrackOrder(user_id=user_id, order_id=order_id), asynchronous=False)


def reorder(user_id, order_id) -> ShoppingCart:
    if not user_id:
        raise AuthRequired()

    with user_locks.hold(user_id):
        return current_domain.process(Reorder(user_id=user_id, order_id=order_id), asynchronous=False)
