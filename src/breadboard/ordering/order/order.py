"""Order aggregate: an immutable record of a checked-out cart.

Items, totals and the delivery address are snapshots taken at placement.
After that only ``status`` (and ``delivered_date``, once) ever change.

State Machine:
    PLACED → CONFIRMED → PREPARING → READY → DELIVERED
    CANCELLED is terminal and never entered by progression.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from breadboard.domain import FETCH_LIMIT, breadboard
from breadboard.ordering.order.events import OrderDelivered, OrderPlaced, OrderStatusAdvanced


class OrderStatus(Enum):
    PLACED = "placed"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


# Forward-only fulfilment path; each step advances exactly one position
PROGRESSION = [
    OrderStatus.PLACED,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.DELIVERED,
]

TERMINAL_STATES = {OrderStatus.DELIVERED, OrderStatus.CANCELLED}


def format_order_number(prefix: str, sequence: int) -> str:
    """``BB-2024-`` + sequence zero-padded to 3 digits (wider values are kept whole)."""
    return f"{prefix}{str(sequence).zfill(3)}"


@breadboard.value_object(part_of="Order")
class DeliveryAddressSnapshot:
    """The delivery address as it was when the order was placed."""

    address_id = String(max_length=50)
    company_name = String(required=True, max_length=255)
    street_address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    contact_name = String(max_length=255)
    contact_phone = String(max_length=30)

    @classmethod
    def of(cls, address):
        return cls(
            address_id=str(address.id),
            company_name=address.company_name,
            street_address=address.street_address,
            city=address.city,
            state=address.state,
            zip_code=address.zip_code,
            contact_name=address.contact_name,
            contact_phone=address.contact_phone,
        )


@breadboard.entity(part_of="Order")
class OrderItem:
    sku = String(required=True, max_length=50)
    name = String(required=True, max_length=255)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    line_total = Float(required=True, min_value=0.0)
    position = Integer(default=0)


@breadboard.aggregate
class Order:
    order_number = String(required=True, max_length=20, unique=True)
    sequence = Integer(required=True, min_value=1)
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    subtotal = Float(default=0.0)
    tax = Float(default=0.0)
    shipping = Float(default=0.0)
    total = Float(default=0.0)
    delivery_address = ValueObject(DeliveryAddressSnapshot)
    status = String(choices=OrderStatus, default=OrderStatus.PLACED.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PAID.value)
    payment_reference = String(max_length=255)
    requested_date = String(max_length=10)  # ISO date string
    delivered_date = DateTime()
    po_number = String(max_length=100)
    notes = Text()
    created_at = DateTime()

    @classmethod
    def place(
        cls,
        order_number,
        sequence,
        user_id,
        cart,
        delivery_address,
        requested_date=None,
        po_number=None,
        notes=None,
        payment_reference=None,
        created_at=None,
        order_id=None,
    ):
        """Snapshot ``cart`` into a new, paid order in the placed state."""
        now = created_at or datetime.now(UTC)
        identity = {"id": order_id} if order_id else {}
        order = cls(
            **identity,
            order_number=order_number,
            sequence=sequence,
            user_id=str(user_id),
            subtotal=cart.subtotal,
            tax=cart.tax,
            shipping=cart.shipping,
            total=cart.total,
            delivery_address=DeliveryAddressSnapshot.of(delivery_address),
            status=OrderStatus.PLACED.value,
            payment_status=PaymentStatus.PAID.value,
            payment_reference=payment_reference,
            requested_date=requested_date,
            po_number=po_number,
            notes=notes,
            created_at=now,
        )
        for position, item in enumerate(cart.lines):
            order.add_items(
                OrderItem(
                    sku=item.sku,
                    name=item.name,
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                    line_total=item.line_total,
                    position=position,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order_number,
                user_id=str(user_id),
                item_count=len(order.items),
                total=order.total,
                placed_at=now,
            )
        )
        return order

    @property
    def lines(self) -> list[OrderItem]:
        return sorted(self.items, key=lambda item: item.position)

    @property
    def is_terminal(self) -> bool:
        return OrderStatus(self.status) in TERMINAL_STATES

    def advance_status(self):
        """Move one step along the fulfilment path."""
        current = OrderStatus(self.status)
        if current in TERMINAL_STATES:
            raise ValidationError({"status": [f"Order is already {current.value}"]})

        next_status = PROGRESSION[PROGRESSION.index(current) + 1]
        self.status = next_status.value

        self.raise_(
            OrderStatusAdvanced(
                order_id=str(self.id),
                order_number=self.order_number,
                previous_status=current.value,
                new_status=next_status.value,
            )
        )

        if next_status == OrderStatus.DELIVERED and self.delivered_date is None:
            self.delivered_date = datetime.now(UTC)
            self.raise_(
                OrderDelivered(
                    order_id=str(self.id),
                    order_number=self.order_number,
                    delivered_at=self.delivered_date,
                )
            )


@breadboard.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """The user's orders, most recent first."""
        orders = self._dao.query.filter(user_id=str(user_id)).limit(FETCH_LIMIT).all().items
        return sorted(orders, key=lambda order: order.sequence, reverse=True)

    def count(self) -> int:
        return len(self._dao.query.limit(FETCH_LIMIT).all().items)
