"""Seed data for the bakery storefront.

Loads categories, products, demo accounts, delivery addresses and a short
order history into the active domain. The MOQ configuration lives here too
and backs the default MOQ policy.

Demo sign-in: ``buyer@sunrisecafe.com`` / ``password123``.
"""

from datetime import UTC, datetime
from functools import lru_cache

from protean.utils.globals import current_domain

from breadboard.catalogue.product import Category, Product
from breadboard.config import get_settings
from breadboard.identity.address import DeliveryAddress
from breadboard.identity.user import User, UserRole, hash_password
from breadboard.ordering.cart.cart import ShoppingCart
from breadboard.ordering.order.order import Order, OrderStatus, format_order_number
from breadboard.ordering.order.sequence import OrderNumberSequence, order_sequence
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)

CATEGORIES = [
    {"id": "cat-breads", "name": "Breads"},
    {"id": "cat-pastries", "name": "Pastries"},
    {"id": "cat-cakes", "name": "Cakes"},
    {"id": "cat-cookies", "name": "Cookies"},
]

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri"]

PRODUCTS = [
    {
        "id": "prod-001",
        "sku": "BRD-SOUR-001",
        "name": "Classic Sourdough Loaf",
        "description": "Naturally leavened country loaf with a crackling crust and open crumb.",
        "image_urls": ["https://images.breadboard.example/sourdough.jpg"],
        "category_id": "cat-breads",
        "price": 6.50,
        "inventory": 200,
        "tags": ["bestseller", "vegan"],
        "allergens": ["wheat"],
        "lead_time_days": 1,
        "available_days": WEEKDAYS,
    },
    {
        "id": "prod-002",
        "sku": "BRD-BAG-002",
        "name": "Everything Bagels (Dozen)",
        "description": "Kettle-boiled bagels topped with sesame, poppy, garlic and onion.",
        "image_urls": ["https://images.breadboard.example/bagels.jpg"],
        "category_id": "cat-breads",
        "price": 12.00,
        "inventory": 80,
        "tags": ["breakfast"],
        "allergens": ["wheat", "sesame"],
        "lead_time_days": 1,
        "available_days": WEEKDAYS,
    },
    {
        "id": "prod-003",
        "sku": "PST-CROI-003",
        "name": "Butter Croissants (Box of 12)",
        "description": "Laminated with cultured butter and baked golden each morning.",
        "image_urls": [
            "https://images.breadboard.example/croissants.jpg",
            "https://images.breadboard.example/croissants-box.jpg",
        ],
        "category_id": "cat-pastries",
        "price": 24.00,
        "inventory": 40,
        "tags": ["breakfast", "bestseller"],
        "allergens": ["wheat", "milk", "eggs"],
        "lead_time_days": 1,
        "available_days": WEEKDAYS,
    },
    {
        "id": "prod-004",
        "sku": "PST-DAN-004",
        "name": "Fruit Danish Assortment",
        "description": "Seasonal fruit danishes with vanilla custard.",
        "image_urls": ["https://images.breadboard.example/danish.jpg"],
        "category_id": "cat-pastries",
        "price": 18.50,
        "inventory": 30,
        "tags": ["seasonal"],
        "allergens": ["wheat", "milk", "eggs"],
        "lead_time_days": 2,
        "available_days": ["Tue", "Thu"],
    },
    {
        "id": "prod-005",
        "sku": "CKE-CHOC-005",
        "name": "Chocolate Layer Cake",
        "description": "Three layers of dark chocolate sponge with ganache frosting.",
        "image_urls": ["https://images.breadboard.example/chocolate-cake.jpg"],
        "category_id": "cat-cakes",
        "price": 45.00,
        "inventory": 10,
        "tags": ["celebration"],
        "allergens": ["wheat", "milk", "eggs", "soy"],
        "lead_time_days": 3,
        "available_days": WEEKDAYS,
    },
    {
        "id": "prod-006",
        "sku": "CKE-CHS-006",
        "name": "New York Cheesecake",
        "description": "Dense, creamy cheesecake on a graham cracker crust.",
        "image_urls": ["https://images.breadboard.example/cheesecake.jpg"],
        "category_id": "cat-cakes",
        "price": 38.00,
        "inventory": 12,
        "tags": ["celebration", "bestseller"],
        "allergens": ["wheat", "milk", "eggs"],
        "lead_time_days": 2,
        "available_days": ["Mon", "Wed", "Fri"],
    },
    {
        "id": "prod-007",
        "sku": "CKE-CUP-007",
        "name": "Vanilla Cupcakes (Dozen)",
        "description": "Madagascar vanilla cupcakes with buttercream swirls.",
        "image_urls": ["https://images.breadboard.example/cupcakes.jpg"],
        "category_id": "cat-cakes",
        "price": 30.00,
        "inventory": 25,
        "tags": ["celebration"],
        "allergens": ["wheat", "milk", "eggs"],
        "lead_time_days": 2,
        "available_days": WEEKDAYS,
    },
    {
        "id": "prod-008",
        "sku": "CKY-CHIP-008",
        "name": "Chocolate Chip Cookies (Dozen)",
        "description": "Brown butter cookies loaded with dark chocolate chunks.",
        "image_urls": ["https://images.breadboard.example/chocolate-chip.jpg"],
        "category_id": "cat-cookies",
        "price": 10.00,
        "inventory": 100,
        "tags": ["bestseller"],
        "allergens": ["wheat", "milk", "eggs"],
        "lead_time_days": 1,
        "available_days": WEEKDAYS,
    },
    {
        "id": "prod-009",
        "sku": "BRD-RYE-009",
        "name": "Seeded Rye",
        "description": "Dark rye with caraway and sunflower seeds.",
        "image_urls": ["https://images.breadboard.example/rye.jpg"],
        "category_id": "cat-breads",
        "price": 7.25,
        "inventory": 0,
        "tags": ["vegan"],
        "allergens": ["wheat", "rye"],
        "lead_time_days": 2,
        "available_days": ["Mon", "Thu"],
    },
    {
        "id": "prod-010",
        "sku": "CKY-OAT-010",
        "name": "Oatmeal Raisin Cookies (Dozen)",
        "description": "Chewy oat cookies with plump raisins and cinnamon.",
        "image_urls": ["https://images.breadboard.example/oatmeal-raisin.jpg"],
        "category_id": "cat-cookies",
        "price": 9.50,
        "inventory": 60,
        "tags": [],
        "allergens": ["wheat", "milk", "eggs"],
        "lead_time_days": 1,
        "available_days": WEEKDAYS,
    },
]

# SKU -> ordering rule; SKUs not listed order in ones
MOQ_CONFIG = {
    "BRD-SOUR-001": {"min_order_qty": 6, "increment": 6, "default_qty": 6},
    "BRD-BAG-002": {"min_order_qty": 2, "increment": 1, "default_qty": 2},
    "PST-DAN-004": {"min_order_qty": 2, "increment": 2, "default_qty": 2},
    "CKE-CUP-007": {"min_order_qty": 1, "increment": 1, "default_qty": 2},
    "CKY-CHIP-008": {"min_order_qty": 3, "increment": 1, "default_qty": 3},
}

USERS = [
    {
        "id": "user-001",
        "company_name": "Sunrise Cafe",
        "contact_name": "Maya Patel",
        "email": "buyer@sunrisecafe.com",
        "phone": "555-0101",
        "password": "password123",
        "is_email_verified": True,
        "role": UserRole.USER.value,
    },
    {
        "id": "user-002",
        "company_name": "Breadboard Bakery",
        "contact_name": "Sam Rivera",
        "email": "admin@breadboard.example",
        "phone": "555-0100",
        "password": "admin123",
        "is_email_verified": True,
        "role": UserRole.ADMIN.value,
    },
]

DELIVERY_ADDRESSES = [
    {
        "id": "addr-001",
        "company_name": "Sunrise Cafe",
        "street_address": "123 Main Street",
        "city": "Portland",
        "state": "OR",
        "zip_code": "97201",
        "contact_name": "Maya Patel",
        "contact_phone": "555-0101",
    },
    {
        "id": "addr-002",
        "company_name": "Sunrise Cafe - Pearl District",
        "street_address": "890 NW Glisan Street",
        "city": "Portland",
        "state": "OR",
        "zip_code": "97209",
        "contact_name": "Leo Chen",
        "contact_phone": "555-0102",
    },
]

ORDERS = [
    {
        "id": "order-001",
        "user_id": "user-001",
        "address_id": "addr-001",
        "items": [("prod-001", 12), ("prod-003", 2)],
        "status": OrderStatus.DELIVERED.value,
        "created_at": datetime(2024, 1, 8, 9, 30, tzinfo=UTC),
        "delivered_date": datetime(2024, 1, 10, 7, 15, tzinfo=UTC),
        "po_number": "PO-1001",
    },
    {
        "id": "order-002",
        "user_id": "user-001",
        "address_id": "addr-002",
        "items": [("prod-008", 6), ("prod-007", 1)],
        "status": OrderStatus.PREPARING.value,
        "created_at": datetime(2024, 1, 15, 14, 5, tzinfo=UTC),
        "notes": "Deliver to the side entrance.",
    },
    {
        "id": "order-003",
        "user_id": "user-001",
        "address_id": "addr-001",
        "items": [("prod-002", 2)],
        "status": OrderStatus.PLACED.value,
        "created_at": datetime(2024, 1, 18, 8, 0, tzinfo=UTC),
        "requested_date": "2024-01-22",
    },
]


@lru_cache(maxsize=None)
def _seed_password_hash(password: str) -> str:
    return hash_password(password)


def _seed_catalogue():
    categories = current_domain.repository_for(Category)
    for record in CATEGORIES:
        categories.add(Category(**record))

    products = current_domain.repository_for(Product)
    for record in PRODUCTS:
        products.add(Product(**record))


def _seed_accounts():
    users = current_domain.repository_for(User)
    for record in USERS:
        fields = {key: value for key, value in record.items() if key != "password"}
        users.add(
            User(
                **fields,
                password_hash=_seed_password_hash(record["password"]),
                registered_at=datetime(2024, 1, 1, tzinfo=UTC),
                email_verified_at=datetime(2024, 1, 1, tzinfo=UTC) if record["is_email_verified"] else None,
            )
        )

    addresses = current_domain.repository_for(DeliveryAddress)
    for record in DELIVERY_ADDRESSES:
        addresses.add(DeliveryAddress(**record))


def _seed_orders():
    products = current_domain.repository_for(Product)
    addresses = current_domain.repository_for(DeliveryAddress)
    orders = current_domain.repository_for(Order)

    for sequence, record in enumerate(ORDERS, start=1):
        cart = ShoppingCart.create(record["user_id"])
        lines = []
        for product_id, quantity in record["items"]:
            product = products.get(product_id)
            lines.append((product, quantity, product.price))
        cart.replace_items(lines)

        order = Order.place(
            order_number=format_order_number(get_settings().order_number_prefix, sequence),
            sequence=sequence,
            user_id=record["user_id"],
            cart=cart,
            delivery_address=addresses.get(record["address_id"]),
            requested_date=record.get("requested_date"),
            po_number=record.get("po_number"),
            notes=record.get("notes"),
            created_at=record["created_at"],
            order_id=record["id"],
        )
        order.status = record["status"]
        order.delivered_date = record.get("delivered_date")
        orders.add(order)

    current_domain.repository_for(OrderNumberSequence).add(order_sequence(start_at=len(ORDERS)))


def seed_storefront() -> bool:
    """Load the seed data once. Returns False when the store was already seeded."""
    if current_domain.repository_for(Category).all_categories():
        return False

    _seed_catalogue()
    _seed_accounts()
    _seed_orders()

    logger.info(
        "storefront_seeded",
        categories=len(CATEGORIES),
        products=len(PRODUCTS),
        users=len(USERS),
        orders=len(ORDERS),
    )
    return True
