"""Cart Engine entry points.

Every mutation for a user runs under that user's lock, so the read of the
current cart, the recomputed totals and the write happen as one step.
"""

from protean.utils.globals import current_domain

from breadboard.errors import AuthRequired
from breadboard.ordering.cart.cart import ShoppingCart
from breadboard.ordering.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartItem
from breadboard.ordering.cart.validation import CartValidation, get_cart, validate_cart
from breadboard.shared.locks import user_locks

__all__ = [
    "CartValidation",
    "add_to_cart",
    "clear_cart",
    "get_cart",
    "remove_from_cart",
    "update_cart_item",
    "validate_cart",
]


def _require_user_id(user_id):
    if not user_id:
        raise AuthRequired()


def add_to_cart(user_id, product_id, quantity: int) -> ShoppingCart:
    _require_user_id(user_id)
    with user_locks.hold(user_id):
        return current_domain.process(
            AddToCart(user_id=user_id, product_id=product_id, quantity=quantity), asynchronous=False
        )


def update_cart_item(user_id, product_id, quantity: int) -> ShoppingCart:
    _require_user_id(user_id)
    with user_locks.hold(user_id):
        return current_domain.process(
            UpdateCartItem(user_id=user_id, product_id=product_id, quantity=quantity), asynchronous=False
        )


def remove_from_cart(user_id, product_id) -> ShoppingCart:
    _require_user_id(user_id)
    with user_locks.hold(user_id):
        return current_domain.process(RemoveFromCart(user_id=user_id, product_id=product_id), asynchronous=False)


def clear_cart(user_id) -> ShoppingCart:
    _require_user_id(user_id)
    with user_locks.hold(user_id):
        return current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
