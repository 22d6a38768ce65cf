"""Integration tests for the order endpoints via TestClient."""

import random

from breadboard.config import configure
from breadboard.ordering.order.tracking import FulfillmentSimulator, set_simulator
from breadboard.shared.faults import FaultInjector, set_injector


def _fill_cart(client, headers, product_id="prod-001", quantity=6):
    response = client.post("/cart/items", json={"product_id": product_id, "quantity": quantity}, headers=headers)
    assert response.status_code == 200


class TestCreateOrder:
    def test_create_order(self, client, auth_headers):
        _fill_cart(client, auth_headers)

        response = client.post(
            "/orders",
            json={"delivery_address_id": "addr-002", "po_number": "PO-2044", "requested_date": "2024-02-02"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["order_number"] == "BB-2024-004"
        assert body["status"] == "placed"
        assert body["payment_status"] == "paid"
        assert body["total"] == 57.51
        assert body["po_number"] == "PO-2044"
        assert body["delivery_address"]["street_address"] == "890 NW Glisan Street"
        assert body["items"][0]["sku"] == "BRD-SOUR-001"

        assert client.get("/cart", headers=auth_headers).json()["items"] == []

    def test_empty_cart(self, client, auth_headers):
        response = client.post("/orders", json={"delivery_address_id": "addr-001"}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["code"] == "EMPTY_CART"

    def test_unknown_address(self, client, auth_headers):
        _fill_cart(client, auth_headers)

        response = client.post("/orders", json={"delivery_address_id": "addr-404"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "ADDRESS_NOT_FOUND"

    def test_requires_auth(self, client):
        assert client.post("/orders", json={"delivery_address_id": "addr-001"}).status_code == 401


class TestListOrders:
    def test_list(self, client, auth_headers):
        response = client.get("/orders", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert [order["order_number"] for order in body["data"]] == ["BB-2024-003", "BB-2024-002", "BB-2024-001"]
        assert body["total"] == 3

    def test_filter_by_status(self, client, auth_headers):
        response = client.get("/orders", params={"status": "delivered"}, headers=auth_headers)

        assert [order["id"] for order in response.json()["data"]] == ["order-001"]


class TestGetOrder:
    def test_get_order(self, client, auth_headers):
        set_simulator(FulfillmentSimulator(probability=0.0))

        response = client.get("/orders/order-002", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "preparing"
        assert body["notes"] == "Deliver to the side entrance."
        assert body["total"] == 98.1

    def test_get_order_advances(self, client, auth_headers):
        set_simulator(FulfillmentSimulator(probability=1.0))

        assert client.get("/orders/order-003", headers=auth_headers).json()["status"] == "confirmed"

    def test_missing_order(self, client, auth_headers):
        response = client.get("/orders/order-404", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "ORDER_NOT_FOUND"


class TestReorder:
    def test_reorder(self, client, auth_headers):
        response = client.post("/orders/order-002/reorder", headers=auth_headers)

        assert response.status_code == 200
        assert {item["sku"]: item["quantity"] for item in response.json()["items"]} == {
            "CKY-CHIP-008": 6,
            "CKE-CUP-007": 1,
        }
        assert client.get("/cart", headers=auth_headers).json()["total"] == 98.1


class TestInjectedFaults:
    def test_rate_limited_order_creation_places_nothing(self, client, auth_headers):
        _fill_cart(client, auth_headers)
        configure(faults_enabled=True, rate_limit_rate=1.0, min_delay_seconds=0, max_delay_seconds=0)
        set_injector(FaultInjector(rng=random.Random(1)))

        response = client.post("/orders", json={"delivery_address_id": "addr-001"}, headers=auth_headers)

        assert response.status_code == 429
        assert response.json()["code"] == "RATE_LIMIT"
        assert response.json()["transient"] is True

        configure(faults_enabled=False)
        assert len(client.get("/orders", headers=auth_headers).json()["data"]) == 3
        assert len(client.get("/cart", headers=auth_headers).json()["items"]) == 1
