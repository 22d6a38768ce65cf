"""Product and Category aggregates.

Products are seeded reference data: everything is immutable once loaded
except ``inventory``, which only the restock collaborator changes through
``AdjustInventory``.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, List, String, Text

from breadboard.catalogue.events import InventoryAdjusted
from breadboard.domain import FETCH_LIMIT, breadboard


class Weekday(Enum):
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"


@breadboard.aggregate
class Category:
    name = String(required=True, max_length=100)


@breadboard.aggregate
class Product:
    sku = String(required=True, max_length=50, unique=True)
    name = String(required=True, max_length=255)
    description = Text()
    image_urls = List(content_type=String, default=list)
    category_id = Identifier(required=True)
    price = Float(required=True, min_value=0.0)
    inventory = Integer(default=0, min_value=0)
    tags = List(content_type=String, default=list)
    allergens = List(content_type=String, default=list)
    lead_time_days = Integer(default=0, min_value=0)
    available_days = List(content_type=String, default=list)
    updated_at = DateTime()

    @property
    def primary_image_url(self) -> str | None:
        return self.image_urls[0] if self.image_urls else None

    def matches_search(self, text: str) -> bool:
        """Case-insensitive substring match against name, description or any tag."""
        needle = text.lower()
        return (
            needle in self.name.lower()
            or needle in (self.description or "").lower()
            or any(needle in tag.lower() for tag in self.tags)
        )

    def adjust_inventory(self, inventory: int):
        if inventory < 0:
            raise ValidationError({"inventory": ["Inventory cannot be negative"]})

        previous = self.inventory
        self.inventory = inventory
        self.updated_at = datetime.now(UTC)

        self.raise_(
            InventoryAdjusted(
                product_id=str(self.id),
                sku=self.sku,
                previous_inventory=previous,
                new_inventory=inventory,
            )
        )


@breadboard.repository(part_of=Product)
class ProductRepository:
    def find_by_sku(self, sku: str) -> Product | None:
        results = self._dao.query.filter(sku=sku).all().items
        return results[0] if results else None

    def all_products(self) -> list[Product]:
        products = self._dao.query.limit(FETCH_LIMIT).all().items
        return sorted(products, key=lambda product: str(product.id))


@breadboard.repository(part_of=Category)
class CategoryRepository:
    def all_categories(self) -> list[Category]:
        categories = self._dao.query.limit(FETCH_LIMIT).all().items
        return sorted(categories, key=lambda category: category.name)
