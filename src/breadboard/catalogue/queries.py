"""Catalogue read operations: filtered product pages, lookups and categories."""

import math
from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from breadboard.catalogue.product import Category, Product
from breadboard.config import get_settings
from breadboard.errors import ProductNotFound


@dataclass(frozen=True)
class ProductFilters:
    search: str | None = None
    category_id: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    page: int = 1
    page_size: int | None = None


@dataclass(frozen=True)
class ProductPage:
    items: list[Product]
    page: int
    page_size: int
    total: int
    total_pages: int


def list_products(filters: ProductFilters | None = None) -> ProductPage:
    """Filter, then paginate.

    Search, category and tags are ANDed together; within the search the
    fields are ORed, and a product passes the tag filter if it has ANY of
    the requested tags.
    """
    filters = filters or ProductFilters()
    page = max(filters.page or 1, 1)
    page_size = filters.page_size or get_settings().default_page_size

    products = current_domain.repository_for(Product).all_products()

    if filters.search:
        products = [p for p in products if p.matches_search(filters.search)]

    if filters.category_id:
        products = [p for p in products if str(p.category_id) == filters.category_id]

    if filters.tags:
        wanted = set(filters.tags)
        products = [p for p in products if wanted.intersection(p.tags)]

    start = (page - 1) * page_size
    total = len(products)

    return ProductPage(
        items=products[start : start + page_size],
        page=page,
        page_size=page_size,
        total=total,
        total_pages=math.ceil(total / page_size),
    )


def get_product(product_id: str) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise ProductNotFound() from None


def find_product_by_sku(sku: str) -> Product | None:
    return current_domain.repository_for(Product).find_by_sku(sku)


def list_categories() -> list[Category]:
    return current_domain.repository_for(Category).all_categories()


def category_names() -> dict[str, str]:
    return {str(category.id): category.name for category in list_categories()}
