"""Shopping Cart aggregate: one per user, converted to an Order at checkout.

Each line snapshots the product's SKU, name, image and unit price when it
is set. Totals are always derived from the lines:

    subtotal = round2(sum of line totals)
    tax      = round2(subtotal * tax rate)
    shipping = 0 when subtotal > threshold, flat fee otherwise
    total    = round2(subtotal + tax + shipping)
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from breadboard.domain import breadboard
from breadboard.ordering.cart.events import CartCleared, CartItemRemoved, CartItemSet, CartRefilled
from breadboard.shared.pricing import compute_totals, line_total


@breadboard.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Identifier(required=True)
    sku = String(required=True, max_length=50)
    name = String(required=True, max_length=255)
    image_url = String(max_length=1024)
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    line_total = Float(required=True, min_value=0.0)
    position = Integer(default=0)


@breadboard.aggregate
class ShoppingCart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    subtotal = Float(default=0.0)
    tax = Float(default=0.0)
    shipping = Float(default=0.0)
    total = Float(default=0.0)
    updated_at = DateTime()

    @classmethod
    def create(cls, user_id):
        cart = cls(user_id=str(user_id))
        cart._recalculate()
        return cart

    @property
    def lines(self) -> list[CartItem]:
        """Cart items in the order they were first added."""
        return sorted(self.items, key=lambda item: item.position)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def find_item(self, product_id) -> CartItem | None:
        return next((item for item in self.items if str(item.product_id) == str(product_id)), None)

    def set_item(self, product, quantity: int):
        """Put ``quantity`` of ``product`` in the cart, replacing any existing quantity."""
        existing = self.find_item(product.id)
        previous_quantity = existing.quantity if existing else 0

        if existing:
            existing.quantity = quantity
            existing.line_total = line_total(existing.unit_price, quantity)
        else:
            self.add_items(
                CartItem(
                    product_id=str(product.id),
                    sku=product.sku,
                    name=product.name,
                    image_url=product.primary_image_url,
                    unit_price=product.price,
                    quantity=quantity,
                    line_total=line_total(product.price, quantity),
                    position=self._next_position(),
                )
            )

        self._recalculate()
        self.raise_(
            CartItemSet(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product.id),
                previous_quantity=previous_quantity,
                quantity=quantity,
            )
        )

    def remove_item(self, product_id):
        """Drop the line for ``product_id``. Absent products are ignored."""
        item = self.find_item(product_id)
        if item is None:
            return

        self.remove_items(item)
        self._recalculate()
        self.raise_(CartItemRemoved(cart_id=str(self.id), user_id=str(self.user_id), product_id=str(product_id)))

    def clear(self):
        for item in list(self.items):
            self.remove_items(item)

        self._recalculate()
        self.raise_(CartCleared(cart_id=str(self.id), user_id=str(self.user_id)))

    def replace_items(self, lines):
        """Swap every line for ``lines``: ``(product, quantity, unit_price)`` tuples."""
        for item in list(self.items):
            self.remove_items(item)

        for position, (product, quantity, unit_price) in enumerate(lines):
            self.add_items(
                CartItem(
                    product_id=str(product.id),
                    sku=product.sku,
                    name=product.name,
                    image_url=product.primary_image_url,
                    unit_price=unit_price,
                    quantity=quantity,
                    line_total=line_total(unit_price, quantity),
                    position=position,
                )
            )

        self._recalculate()
        self.raise_(CartRefilled(cart_id=str(self.id), user_id=str(self.user_id), item_count=len(lines)))

    def _next_position(self) -> int:
        return max((item.position for item in self.items), default=-1) + 1

    def _recalculate(self):
        totals = compute_totals(item.line_total for item in self.items)
        self.subtotal = totals.subtotal
        self.tax = totals.tax
        self.shipping = totals.shipping
        self.total = totals.total
        self.updated_at = datetime.now(UTC)


@breadboard.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def find_by_user(self, user_id) -> ShoppingCart | None:
        results = self._dao.query.filter(user_id=str(user_id)).all().items
        return results[0] if results else None
