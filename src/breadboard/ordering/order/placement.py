"""Checkout: turning a user's cart into an order."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from breadboard.config import get_settings
from breadboard.domain import breadboard
from breadboard.errors import CartInvalid, EmptyCart
from breadboard.identity.access import require_user
from breadboard.identity.address import get_address
from breadboard.ordering.cart.cart import ShoppingCart
from breadboard.ordering.cart.validation import validate_cart
from breadboard.ordering.order.order import Order, format_order_number
from breadboard.ordering.order.sequence import OrderNumberSequence, order_sequence
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)


@breadboard.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    delivery_address_id = Identifier(required=True)
    requested_date = String(max_length=10)
    po_number = String(max_length=100)
    notes = Text()
    payment_reference = String(max_length=255)


@breadboard.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        """Check the cart, snapshot it into an order and empty it.

        Checks run in order: the caller is known, the cart has items, the
        address exists, and a fresh validation of the cart passes.
        """
        require_user(command.user_id)

        carts = current_domain.repository_for(ShoppingCart)
        cart = carts.find_by_user(command.user_id)
        if cart is None or cart.is_empty:
            raise EmptyCart()

        address = get_address(command.delivery_address_id)

        validation = validate_cart(command.user_id)
        if not validation.valid:
            logger.warning("checkout_rejected", user_id=str(command.user_id), errors=validation.errors)
            raise CartInvalid(
                f"Cart validation failed: {', '.join(validation.errors)}",
                errors=validation.errors,
            )

        sequence = order_sequence()
        number = sequence.next_value()
        current_domain.repository_for(OrderNumberSequence).add(sequence)

        order = Order.place(
            order_number=format_order_number(get_settings().order_number_prefix, number),
            sequence=number,
            user_id=command.user_id,
            cart=cart,
            delivery_address=address,
            requested_date=command.requested_date,
            po_number=command.po_number,
            notes=command.notes,
            payment_reference=command.payment_reference,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        carts.add(cart)

        logger.info(
            "order_placed",
            user_id=str(command.user_id),
            order_number=order.order_number,
            total=order.total,
        )
        return order
