"""Read-side helpers for orders."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from breadboard.errors import OrderNotFound
from breadboard.identity.access import require_user
from breadboard.ordering.order.order import Order

ALL_STATUSES = "all"


def find_order(user_id, order_id) -> Order:
    """The user's order ``order_id``. Other users' orders are reported as missing."""
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound() from None

    if str(order.user_id) != str(user_id):
        raise OrderNotFound()
    return order


def list_orders(user_id, status: str | None = None) -> list[Order]:
    """The user's orders, most recent first, optionally narrowed to one status."""
    require_user(user_id)
    orders = current_domain.repository_for(Order).for_user(user_id)

    if status and status != ALL_STATUSES:
        orders = [order for order in orders if order.status == status]
    return orders
