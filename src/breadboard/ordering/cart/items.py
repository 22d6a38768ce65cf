"""Cart item management: commands and handler.

Adding a product that is already in the cart replaces its quantity. Update
follows exactly the same rules as add.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from breadboard.catalogue.moq import MOQReason, get_policy
from breadboard.catalogue.product import Product
from breadboard.domain import breadboard
from breadboard.errors import InsufficientInventory, InvalidIncrement, MinQtyNotMet, ProductNotFound
from breadboard.identity.access import require_user
from breadboard.ordering.cart.cart import ShoppingCart
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)


@breadboard.command(part_of="ShoppingCart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@breadboard.command(part_of="ShoppingCart")
class UpdateCartItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@breadboard.command(part_of="ShoppingCart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@breadboard.command(part_of="ShoppingCart")
class ClearCart:
    user_id = Identifier(required=True)


def cart_for(user_id) -> ShoppingCart:
    """The user's stored cart, or a fresh unsaved one."""
    cart = current_domain.repository_for(ShoppingCart).find_by_user(user_id)
    return cart if cart is not None else ShoppingCart.create(user_id)


def check_quantity(product: Product, quantity: int) -> None:
    """Raise when ``quantity`` breaks the product's MOQ rule or exceeds stock."""
    policy = get_policy()
    rule = policy.resolve(product.sku)
    check = policy.validate(product.sku, quantity)

    if check.reason is MOQReason.BELOW_MINIMUM:
        raise MinQtyNotMet(f"Minimum order quantity is {rule.min_order_qty}", suggested=check.suggested)

    if check.reason is MOQReason.INVALID_INCREMENT:
        raise InvalidIncrement(
            f"Quantity must be in increments of {rule.increment}. Suggested: {check.suggested}",
            suggested=check.suggested,
        )

    if quantity > product.inventory:
        raise InsufficientInventory(f"Only {product.inventory} items available", available=product.inventory)


@breadboard.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        return self._set_quantity(command)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        return self._set_quantity(command)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        require_user(command.user_id)

        cart = cart_for(command.user_id)
        cart.remove_item(command.product_id)
        current_domain.repository_for(ShoppingCart).add(cart)
        return cart

    @handle(ClearCart)
    def clear_cart(self, command):
        require_user(command.user_id)

        cart = cart_for(command.user_id)
        cart.clear()
        current_domain.repository_for(ShoppingCart).add(cart)
        return cart

    def _set_quantity(self, command):
        require_user(command.user_id)

        try:
            product = current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise ProductNotFound() from None

        try:
            check_quantity(product, command.quantity)
        except (MinQtyNotMet, InvalidIncrement, InsufficientInventory) as exc:
            logger.warning(
                "cart_quantity_rejected",
                user_id=str(command.user_id),
                sku=product.sku,
                quantity=command.quantity,
                code=exc.code,
            )
            raise

        cart = cart_for(command.user_id)
        cart.set_item(product, command.quantity)
        current_domain.repository_for(ShoppingCart).add(cart)

        logger.info("cart_item_set", user_id=str(command.user_id), sku=product.sku, quantity=command.quantity)
        return cart
