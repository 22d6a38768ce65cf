"""Catalogue load test scenarios.

Anonymous browsing: listing and filtering products, viewing details and
previewing MOQ rules. Every request is read-only.
"""

import random

from locust import HttpUser, TaskSet, between, task

from loadtests.data_generators import ORDERABLE, product_filters
from loadtests.helpers.response import extract_error_detail, is_transient


class BrowseCatalogue(TaskSet):
    """Browses the catalogue without signing in."""

    @task(5)
    def list_products(self):
        with self.client.get(
            "/products",
            params=product_filters(),
            catch_response=True,
            name="GET /products",
        ) as resp:
            if resp.status_code != 200 and not is_transient(resp):
                resp.failure(f"List products failed: {resp.status_code} {extract_error_detail(resp)}")

    @task(3)
    def product_detail(self):
        product_id = random.choice(list(ORDERABLE))
        with self.client.get(
            f"/products/{product_id}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code != 200 and not is_transient(resp):
                resp.failure(f"Product detail failed: {resp.status_code} {extract_error_detail(resp)}")

    @task(2)
    def moq_preview(self):
        with self.client.get(
            "/products/prod-001/moq",
            params={"quantity": random.randint(1, 20)},
            catch_response=True,
            name="GET /products/{id}/moq",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"MOQ preview failed: {resp.status_code} {extract_error_detail(resp)}")

    @task(1)
    def categories(self):
        with self.client.get("/categories", catch_response=True, name="GET /categories") as resp:
            if resp.status_code != 200 and not is_transient(resp):
                resp.failure(f"Categories failed: {resp.status_code}")

    @task(1)
    def leave(self):
        self.interrupt()


class CatalogueBrowser(HttpUser):
    wait_time = between(0.5, 2.0)
    tasks = [BrowseCatalogue]
