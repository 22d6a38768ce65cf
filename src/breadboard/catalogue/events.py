"""Domain events for the Product aggregate."""

from protean.fields import Identifier, Integer, String

from breadboard.domain import breadboard


@breadboard.event(part_of="Product")
class InventoryAdjusted:
    """The restock collaborator set a new on-hand inventory for a product."""

    __version__ = 1

    product_id = Identifier(required=True)
    sku = String(required=True)
    previous_inventory = Integer(required=True)
    new_inventory = Integer(required=True)
