"""Pydantic response schemas for the catalogue API."""

from pydantic import BaseModel


class ProductSchema(BaseModel):
    id: str
    sku: str
    name: str
    description: str | None = None
    image_urls: list[str]
    category_id: str
    category_name: str | None = None
    price: float
    inventory: int
    tags: list[str]
    allergens: list[str]
    lead_time_days: int
    available_days: list[str]


class ProductPageSchema(BaseModel):
    data: list[ProductSchema]
    page: int
    page_size: int
    total: int
    total_pages: int


class CategorySchema(BaseModel):
    id: str
    name: str


class MOQSchema(BaseModel):
    """A product's ordering rule, plus an advisory check when a quantity was given."""

    sku: str
    min_order_qty: int
    increment: int
    default_qty: int
    quantity: int | None = None
    ok: bool | None = None
    reason: str | None = None
    suggested: int | None = None


def product_to_schema(product, category_names: dict[str, str]) -> ProductSchema:
    return ProductSchema(
        id=str(product.id),
        sku=product.sku,
        name=product.name,
        description=product.description,
        image_urls=list(product.image_urls),
        category_id=str(product.category_id),
        category_name=category_names.get(str(product.category_id)),
        price=product.price,
        inventory=product.inventory,
        tags=list(product.tags),
        allergens=list(product.allergens),
        lead_time_days=product.lead_time_days,
        available_days=list(product.available_days),
    )
