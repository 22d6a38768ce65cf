"""Pydantic request/response schemas for the cart and order API.

These are external contracts, separate from internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Cart Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "quantity": 6,
                }
            ]
        }
    }


class UpdateCartItemRequest(BaseModel):
    quantity: int


class CartItemSchema(BaseModel):
    product_id: str
    sku: str
    name: str
    image_url: str | None = None
    unit_price: float
    quantity: int
    line_total: float


class CartSchema(BaseModel):
    items: list[CartItemSchema]
    subtotal: float
    tax: float
    shipping: float
    total: float


class CartValidationSchema(BaseModel):
    valid: bool
    errors: list[str]


# ---------------------------------------------------------------------------
# Order Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    delivery_address_id: str
    requested_date: str | None = Field(default=None, max_length=10)
    po_number: str | None = Field(default=None, max_length=100)
    notes: str | None = None
    payment_reference: str | None = None


class OrderItemSchema(BaseModel):
    sku: str
    name: str
    unit_price: float
    quantity: int
    line_total: float


class DeliveryAddressSchema(BaseModel):
    id: str | None = None
    company_name: str
    street_address: str
    city: str
    state: str
    zip_code: str
    contact_name: str | None = None
    contact_phone: str | None = None


class OrderSchema(BaseModel):
    id: str
    order_number: str
    created_at: datetime | None = None
    status: str
    payment_status: str
    payment_reference: str | None = None
    items: list[OrderItemSchema]
    subtotal: float
    tax: float
    shipping: float
    total: float
    delivery_address: DeliveryAddressSchema | None = None
    requested_date: str | None = None
    delivered_date: datetime | None = None
    po_number: str | None = None
    notes: str | None = None


class OrderListSchema(BaseModel):
    data: list[OrderSchema]
    page: int
    page_size: int
    total: int
    total_pages: int


def cart_to_schema(cart) -> CartSchema:
    return CartSchema(
        items=[
            CartItemSchema(
                product_id=str(item.product_id),
                sku=item.sku,
                name=item.name,
                image_url=item.image_url,
                unit_price=item.unit_price,
                quantity=item.quantity,
                line_total=item.line_total,
            )
            for item in cart.lines
        ],
        subtotal=cart.subtotal,
        tax=cart.tax,
        shipping=cart.shipping,
        total=cart.total,
    )


def order_to_schema(order) -> OrderSchema:
    address = order.delivery_address
    return OrderSchema(
        id=str(order.id),
        order_number=order.order_number,
        created_at=order.created_at,
        status=order.status,
        payment_status=order.payment_status,
        payment_reference=order.payment_reference,
        items=[
            OrderItemSchema(
                sku=item.sku,
                name=item.name,
                unit_price=item.unit_price,
                quantity=item.quantity,
                line_total=item.line_total,
            )
            for item in order.lines
        ],
        subtotal=order.subtotal,
        tax=order.tax,
        shipping=order.shipping,
        total=order.total,
        delivery_address=(
            DeliveryAddressSchema(
                id=address.address_id,
                company_name=address.company_name,
                street_address=address.street_address,
                city=address.city,
                state=address.state,
                zip_code=address.zip_code,
                contact_name=address.contact_name,
                contact_phone=address.contact_phone,
            )
            if address
            else None
        ),
        requested_date=order.requested_date,
        delivered_date=order.delivered_date,
        po_number=order.po_number,
        notes=order.notes,
    )
