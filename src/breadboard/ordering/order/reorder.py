"""Reorder: refill the cart from a past order."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from breadboard.catalogue.product import Product
from breadboard.domain import breadboard
from breadboard.identity.access import require_user
from breadboard.ordering.cart.cart import ShoppingCart
from breadboard.ordering.cart.items import cart_for
from breadboard.ordering.order.queries import find_order
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)


@breadboard.command(part_of="ShoppingCart")
class Reorder:
    user_id = Identifier(required=True)
    order_id = Identifier(required=True)


@breadboard.command_handler(part_of=ShoppingCart)
class ReorderHandler:
    @handle(Reorder)
    def reorder(self, command):
        """Replace the whole cart with the order's items that can still be supplied.

        An item is kept when its SKU still resolves to a product with enough
        inventory for the historical quantity. Kept items are priced at the
        product's current price. Everything else is dropped silently.
        """
        require_user(command.user_id)
        order = find_order(command.user_id, command.order_id)

        products = current_domain.repository_for(Product)
        lines = []
        for item in order.lines:
            product = products.find_by_sku(item.sku)
            if product is not None and item.quantity <= product.inventory:
                lines.append((product, item.quantity, product.price))

        cart = cart_for(command.user_id)
        cart.replace_items(lines)
        current_domain.repository_for(ShoppingCart).add(cart)

        logger.info(
            "order_reordered",
            user_id=str(command.user_id),
            order_number=order.order_number,
            kept=len(lines),
            dropped=len(order.items) - len(lines),
        )
        return cart
