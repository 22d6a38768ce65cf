"""Integration tests for the catalogue endpoints via TestClient."""

import random

import pytest

from breadboard.config import configure
from breadboard.shared.faults import FaultInjector, get_injector, set_injector


class TestProductsAPI:
    def test_list_products(self, client):
        response = client.get("/products")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 10
        assert body["page"] == 1
        assert body["page_size"] == 12
        assert len(body["data"]) == 10

    def test_list_products_with_filters(self, client):
        response = client.get("/products", params={"category_id": "cat-cookies", "page_size": 1, "page": 2})

        body = response.json()
        assert body["total"] == 2
        assert body["total_pages"] == 2
        assert len(body["data"]) == 1

    def test_list_products_by_tags(self, client):
        response = client.get("/products", params=[("tags", "vegan"), ("tags", "seasonal")])

        assert response.json()["total"] == 3

    def test_product_detail_includes_category_name(self, client):
        response = client.get("/products/prod-001")

        assert response.status_code == 200
        body = response.json()
        assert body["sku"] == "BRD-SOUR-001"
        assert body["category_name"] == "Breads"
        assert body["price"] == 6.5

    def test_unknown_product(self, client):
        response = client.get("/products/prod-missing")

        assert response.status_code == 404
        assert response.json()["code"] == "PRODUCT_NOT_FOUND"

    def test_moq_rule(self, client):
        response = client.get("/products/prod-001/moq")

        assert response.json()["min_order_qty"] == 6
        assert response.json()["increment"] == 6
        assert response.json()["ok"] is None

    def test_moq_advisory_check(self, client):
        response = client.get("/products/prod-001/moq", params={"quantity": 8})

        body = response.json()
        assert body["ok"] is False
        assert body["reason"] == "invalid increment"
        assert body["suggested"] == 12


class TestCategoriesAPI:
    def test_list_categories(self, client):
        response = client.get("/categories")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Breads", "Cakes", "Cookies", "Pastries"]


class TestInjectedFaults:
    @pytest.fixture(autouse=True)
    def _faults(self):
        configure(faults_enabled=True, min_delay_seconds=0.0, max_delay_seconds=0.0)
        set_injector(FaultInjector(random.Random(0)))

    def test_rate_limited(self, client):
        configure(rate_limit_rate=1.0)

        response = client.get("/products")

        assert response.status_code == 429
        assert response.json()["code"] == "RATE_LIMIT"
        assert response.json()["transient"] is True

    def test_server_error_on_listing(self, client):
        configure(rate_limit_rate=0.0, server_error_rate=1.0)

        response = client.get("/products")

        assert response.status_code == 503
        assert response.json()["code"] == "SERVER_ERROR"

    def test_detail_is_not_exposed_to_server_errors(self, client):
        configure(rate_limit_rate=0.0, server_error_rate=1.0)

        assert client.get("/products/prod-001").status_code == 200


class TestGuardedRequestsUnderLoad:
    def test_default_injector_holds_no_request_history(self, client):
        for _ in range(300):
            assert client.get("/products").status_code == 200

        assert list(vars(get_injector())) == ["rng"]
