"""Integration tests for the cart endpoints via TestClient."""

from breadboard.catalogue.inventory import AdjustInventory
from protean import current_domain


class TestCartAPI:
    def test_requires_auth(self, client):
        assert client.get("/cart").status_code == 401
        assert client.post("/cart/items", json={"product_id": "prod-001", "quantity": 6}).status_code == 401

    def test_empty_cart(self, client, auth_headers):
        response = client.get("/cart", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"items": [], "subtotal": 0.0, "tax": 0.0, "shipping": 15.0, "total": 15.0}

    def test_add_item(self, client, auth_headers):
        response = client.post("/cart/items", json={"product_id": "prod-008", "quantity": 6}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["items"] == [
            {
                "product_id": "prod-008",
                "sku": "CKY-CHIP-008",
                "name": "Chocolate Chip Cookies (Dozen)",
                "image_url": "https://images.breadboard.example/chocolate-chip.jpg",
                "unit_price": 10.0,
                "quantity": 6,
                "line_total": 60.0,
            }
        ]
        assert (body["subtotal"], body["tax"], body["shipping"], body["total"]) == (60.0, 5.4, 15.0, 80.4)

    def test_below_minimum(self, client, auth_headers):
        response = client.post("/cart/items", json={"product_id": "prod-001", "quantity": 4}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json() == {
            "message": "Minimum order quantity is 6",
            "code": "MIN_QTY_NOT_MET",
            "details": {"suggested": 6},
            "transient": False,
        }

    def test_off_increment(self, client, auth_headers):
        response = client.post("/cart/items", json={"product_id": "prod-004", "quantity": 3}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_INCREMENT"
        assert response.json()["details"] == {"suggested": 4}

    def test_insufficient_inventory(self, client, auth_headers):
        response = client.post("/cart/items", json={"product_id": "prod-005", "quantity": 11}, headers=auth_headers)

        assert response.status_code == 422
        assert response.json()["code"] == "INSUFFICIENT_INVENTORY"
        assert response.json()["message"] == "Only 10 items available"

    def test_unknown_product(self, client, auth_headers):
        response = client.post("/cart/items", json={"product_id": "prod-404", "quantity": 1}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "PRODUCT_NOT_FOUND"

    def test_update_and_remove(self, client, auth_headers):
        client.post("/cart/items", json={"product_id": "prod-001", "quantity": 6}, headers=auth_headers)
        client.post("/cart/items", json={"product_id": "prod-008", "quantity": 3}, headers=auth_headers)

        response = client.put("/cart/items/prod-001", json={"quantity": 12}, headers=auth_headers)
        assert response.status_code == 200
        assert [item["quantity"] for item in response.json()["items"]] == [12, 3]

        response = client.delete("/cart/items/prod-001", headers=auth_headers)
        assert [item["sku"] for item in response.json()["items"]] == ["CKY-CHIP-008"]

    def test_clear(self, client, auth_headers):
        client.post("/cart/items", json={"product_id": "prod-008", "quantity": 3}, headers=auth_headers)

        response = client.delete("/cart", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_validate(self, client, auth_headers):
        client.post("/cart/items", json={"product_id": "prod-008", "quantity": 6}, headers=auth_headers)
        assert client.post("/cart/validate", headers=auth_headers).json() == {"valid": True, "errors": []}

        current_domain.process(AdjustInventory(product_id="prod-008", inventory=5), asynchronous=False)

        response = client.post("/cart/validate", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {
            "valid": False,
            "errors": ["Only 5 Chocolate Chip Cookies (Dozen) available (you have 6)"],
        }
