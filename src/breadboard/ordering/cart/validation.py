"""Pre-checkout cart validation against live catalogue state."""

from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from breadboard.catalogue.moq import get_policy
from breadboard.catalogue.product import Product
from breadboard.identity.access import require_user
from breadboard.ordering.cart.cart import ShoppingCart
from breadboard.ordering.cart.items import cart_for


@dataclass(frozen=True)
class CartValidation:
    valid: bool
    errors: list[str] = field(default_factory=list)


def get_cart(user_id) -> ShoppingCart:
    """The user's cart. A user who never touched their cart gets an empty, unsaved one."""
    require_user(user_id)
    return cart_for(user_id)


def validate_cart(user_id) -> CartValidation:
    """Re-check every line; each broken rule yields its own message. Never mutates the cart."""
    cart = get_cart(user_id)
    products = current_domain.repository_for(Product)
    policy = get_policy()
    errors = []

    for item in cart.lines:
        try:
            product = products.get(item.product_id)
        except ObjectNotFoundError:
            errors.append(f"Product {item.name} is no longer available")
            continue

        if item.quantity > product.inventory:
            errors.append(f"Only {product.inventory} {item.name} available (you have {item.quantity})")

        rule = policy.resolve(product.sku)
        if not policy.meets_minimum(product.sku, item.quantity):
            errors.append(f"{item.name}: Minimum order quantity is {rule.min_order_qty}")
        if not policy.on_increment(product.sku, item.quantity):
            errors.append(f"{item.name}: Must be ordered in increments of {rule.increment}")

    return CartValidation(valid=not errors, errors=errors)
