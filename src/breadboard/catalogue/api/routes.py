"""FastAPI endpoints for browsing the catalogue."""

from fastapi import APIRouter, Depends, Query

from breadboard.catalogue.api.schemas import (
    CategorySchema,
    MOQSchema,
    ProductPageSchema,
    ProductSchema,
    product_to_schema,
)
from breadboard.catalogue.moq import get_policy
from breadboard.catalogue.queries import (
    ProductFilters,
    category_names,
    get_product,
    list_categories,
    list_products,
)
from breadboard.shared.faults import RATE_LIMIT_AND_SERVER_ERROR, fault_point

# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get(
    "",
    response_model=ProductPageSchema,
    dependencies=[Depends(fault_point("products.list", RATE_LIMIT_AND_SERVER_ERROR))],
)
async def browse_products(
    search: str | None = None,
    category_id: str | None = None,
    tags: list[str] = Query(default=[]),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1, le=100),
) -> ProductPageSchema:
    result = list_products(
        ProductFilters(
            search=search,
            category_id=category_id,
            tags=tuple(tags),
            page=page,
            page_size=page_size,
        )
    )
    names = category_names()
    return ProductPageSchema(
        data=[product_to_schema(product, names) for product in result.items],
        page=result.page,
        page_size=result.page_size,
        total=result.total,
        total_pages=result.total_pages,
    )


@product_router.get(
    "/{product_id}",
    response_model=ProductSchema,
    dependencies=[Depends(fault_point("products.get"))],
)
async def product_detail(product_id: str) -> ProductSchema:
    return product_to_schema(get_product(product_id), category_names())


@product_router.get("/{product_id}/moq", response_model=MOQSchema)
async def product_moq(product_id: str, quantity: int | None = None) -> MOQSchema:
    """The product's ordering rule; with ``quantity``, an advisory check of it."""
    product = get_product(product_id)
    policy = get_policy()
    rule = policy.resolve(product.sku)

    if quantity is None:
        return MOQSchema(
            sku=product.sku,
            min_order_qty=rule.min_order_qty,
            increment=rule.increment,
            default_qty=rule.default_qty,
        )

    check = policy.validate(product.sku, quantity)
    return MOQSchema(
        sku=product.sku,
        min_order_qty=rule.min_order_qty,
        increment=rule.increment,
        default_qty=rule.default_qty,
        quantity=quantity,
        ok=check.ok,
        reason=check.reason.value if check.reason else None,
        suggested=check.suggested,
    )


# ---------------------------------------------------------------------------
# Category Router
# ---------------------------------------------------------------------------
category_router = APIRouter(prefix="/categories", tags=["categories"])


@category_router.get(
    "",
    response_model=list[CategorySchema],
    dependencies=[Depends(fault_point("categories.list"))],
)
async def categories() -> list[CategorySchema]:
    return [CategorySchema(id=str(category.id), name=category.name) for category in list_categories()]
