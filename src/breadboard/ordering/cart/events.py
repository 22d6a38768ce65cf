"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Identifier, Integer

from breadboard.domain import breadboard


@breadboard.event(part_of="ShoppingCart")
class CartItemSet:
    """A product line was added, or its quantity replaced."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(default=0)
    quantity = Integer(required=True)


@breadboard.event(part_of="ShoppingCart")
class CartItemRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@breadboard.event(part_of="ShoppingCart")
class CartCleared:
    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)


@breadboard.event(part_of="ShoppingCart")
class CartRefilled:
    """The whole cart was replaced with the items of a past order."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item_count = Integer(required=True)
