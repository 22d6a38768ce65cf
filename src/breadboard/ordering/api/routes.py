"""FastAPI routes for the ordering context: cart and orders."""

from fastapi import APIRouter, Depends

from breadboard.identity.api.dependencies import current_user_id
from breadboard.ordering.api.schemas import (
    AddToCartRequest,
    CartSchema,
    CartValidationSchema,
    CreateOrderRequest,
    OrderListSchema,
    OrderSchema,
    UpdateCartItemRequest,
    cart_to_schema,
    order_to_schema,
)
from breadboard.ordering.cart import engine as carts
from breadboard.ordering.order import engine as orders
from breadboard.shared.faults import fault_point

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartSchema)
async def get_cart(user_id: str = Depends(current_user_id)) -> CartSchema:
    return cart_to_schema(carts.get_cart(user_id))


@cart_router.post(
    "/items",
    response_model=CartSchema,
    dependencies=[Depends(fault_point("cart.add"))],
)
async def add_cart_item(body: AddToCartRequest, user_id: str = Depends(current_user_id)) -> CartSchema:
    return cart_to_schema(carts.add_to_cart(user_id, body.product_id, body.quantity))


@cart_router.put(
    "/items/{product_id}",
    response_model=CartSchema,
    dependencies=[Depends(fault_point("cart.update"))],
)
async def update_cart_item(
    product_id: str,
    body: UpdateCartItemRequest,
    user_id: str = Depends(current_user_id),
) -> CartSchema:
    return cart_to_schema(carts.update_cart_item(user_id, product_id, body.quantity))


@cart_router.delete("/items/{product_id}", response_model=CartSchema)
async def remove_cart_item(product_id: str, user_id: str = Depends(current_user_id)) -> CartSchema:
    return cart_to_schema(carts.remove_from_cart(user_id, product_id))


@cart_router.delete("", response_model=CartSchema)
async def clear_cart(user_id: str = Depends(current_user_id)) -> CartSchema:
    return cart_to_schema(carts.clear_cart(user_id))


@cart_router.post("/validate", response_model=CartValidationSchema)
async def validate_cart(user_id: str = Depends(current_user_id)) -> CartValidationSchema:
    result = carts.validate_cart(user_id)
    return CartValidationSchema(valid=result.valid, errors=result.errors)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post(
    "",
    status_code=201,
    response_model=OrderSchema,
    dependencies=[Depends(fault_point("orders.create"))],
)
async def create_order(body: CreateOrderRequest, user_id: str = Depends(current_user_id)) -> OrderSchema:
    order = orders.place_order(
        user_id,
        body.delivery_address_id,
        requested_date=body.requested_date,
        po_number=body.po_number,
        notes=body.notes,
        payment_reference=body.payment_reference,
    )
    return order_to_schema(order)


@order_router.get(
    "",
    response_model=OrderListSchema,
    dependencies=[Depends(fault_point("orders.list"))],
)
async def list_orders(status: str | None = None, user_id: str = Depends(current_user_id)) -> OrderListSchema:
    results = orders.list_orders(user_id, status)
    return OrderListSchema(
        data=[order_to_schema(order) for order in results],
        page=1,
        page_size=len(results),
        total=len(results),
        total_pages=1,
    )


@order_router.get(
    "/{order_id}",
    response_model=OrderSchema,
    dependencies=[Depends(fault_point("orders.get"))],
)
async def get_order(order_id: str, user_id: str = Depends(current_user_id)) -> OrderSchema:
    return order_to_schema(orders.get_order(user_id, order_id))


@order_router.post("/{order_id}/reorder", response_model=CartSchema)
async def reorder(order_id: str, user_id: str = Depends(current_user_id)) -> CartSchema:
    return cart_to_schema(orders.reorder(user_id, order_id))
