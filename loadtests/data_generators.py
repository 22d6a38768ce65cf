"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that match the exact field names expected
by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

DEMO_BUYER = {"email": "buyer@sunrisecafe.com", "password": "password123"}

DELIVERY_ADDRESS_IDS = ["addr-001", "addr-002"]

# Seeded products with a quantity that satisfies their ordering rule
ORDERABLE = {
    "prod-001": [6, 12],
    "prod-002": [2, 3],
    "prod-003": [1, 2],
    "prod-004": [2, 4],
    "prod-007": [1, 2],
    "prod-008": [3, 6],
    "prod-010": [1, 2],
}

SEARCH_TERMS = ["sourdough", "cookies", "cake", "croissant", "rye"]

CATEGORY_IDS = ["cat-breads", "cat-pastries", "cat-cakes", "cat-cookies"]


def registration_data() -> dict:
    return {
        "company_name": fake.company()[:100],
        "contact_name": fake.name()[:100],
        "email": f"{fake.user_name()[:20]}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}",
        "phone": fake.numerify("555-####"),
        "password": fake.password(length=12),
    }


def product_filters() -> dict:
    choice = random.choice(["search", "category", "tags", "page"])
    if choice == "search":
        return {"search": random.choice(SEARCH_TERMS)}
    if choice == "category":
        return {"category_id": random.choice(CATEGORY_IDS)}
    if choice == "tags":
        return {"tags": random.choice(["vegan", "bestseller", "seasonal"])}
    return {"page": random.randint(1, 2), "page_size": 6}


def cart_item_data() -> dict:
    product_id = random.choice(list(ORDERABLE))
    return {"product_id": product_id, "quantity": random.choice(ORDERABLE[product_id])}


def off_increment_item() -> dict:
    """A sourdough quantity the cart must refuse."""
    return {"product_id": "prod-001", "quantity": random.choice([4, 7, 9])}


def checkout_data(payment_reference: str | None = None) -> dict:
    data = {
        "delivery_address_id": random.choice(DELIVERY_ADDRESS_IDS),
        "po_number": f"PO-{random.randint(1000, 9999)}",
        "payment_reference": payment_reference,
    }
    if random.random() < 0.3:
        data["notes"] = fake.sentence(nb_words=6)
    return data
