"""Inventory adjustment: command and handler.

Stands in for the external restock collaborator; nothing in the cart or
order flow changes inventory.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from breadboard.catalogue.product import Product
from breadboard.domain import breadboard
from breadboard.errors import ProductNotFound


@breadboard.command(part_of="Product")
class AdjustInventory:
    product_id = Identifier(required=True)
    inventory = Integer(required=True, min_value=0)


@breadboard.command_handler(part_of=Product)
class AdjustInventoryHandler:
    @handle(AdjustInventory)
    def adjust_inventory(self, command):
        repo = current_domain.repository_for(Product)
        try:
            product = repo.get(command.product_id)
        except ObjectNotFoundError:
            raise ProductNotFound() from None

        product.adjust_inventory(command.inventory)
        repo.add(product)
        return product.inventory
