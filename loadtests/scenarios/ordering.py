"""Ordering load test scenarios.

Two stateful SequentialTaskSet journeys: a buyer who fills a cart and
abandons it, and a buyer who checks out through the payment steps and
then tracks the order. Steps execute in order and transient failures
(injected rate limits and server errors) are retried with backoff.
"""

import time

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import DEMO_BUYER, cart_item_data, checkout_data, off_increment_item
from loadtests.helpers.response import extract_error_detail, is_transient
from loadtests.helpers.state import BuyerState

MAX_ATTEMPTS = 3


def _with_retries(send):
    """Call ``send`` until it returns a non-transient response or attempts run out."""
    for attempt in range(1, MAX_ATTEMPTS + 1):
        resp = send()
        if not is_transient(resp) or attempt == MAX_ATTEMPTS:
            return resp
        with resp:
            resp.failure(f"Transient {resp.status_code}, retrying")
        time.sleep(0.2 * 2**attempt)
    return resp


class _SignedInJourney(SequentialTaskSet):
    def on_start(self):
        self.state = BuyerState()
        with self.client.post("/auth/login", json=DEMO_BUYER, catch_response=True, name="POST /auth/login") as resp:
            if resp.status_code == 200:
                self.state.access_token = resp.json()["tokens"]["access_token"]
            else:
                resp.failure(f"Login failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    def add_item(self, payload):
        return _with_retries(
            lambda: self.client.post(
                "/cart/items",
                json=payload,
                headers=self.state.headers,
                catch_response=True,
                name="POST /cart/items",
            )
        )


class CartAbandonmentJourney(_SignedInJourney):
    """Add Items -> Rejected Quantity -> Remove Item -> Clear."""

    @task
    def add_items(self):
        for _ in range(3):
            resp = self.add_item(cart_item_data())
            with resp:
                if resp.status_code == 200:
                    self.state.product_ids = [item["product_id"] for item in resp.json()["items"]]
                elif not is_transient(resp):
                    resp.failure(f"Add item failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def rejected_quantity(self):
        with self.add_item(off_increment_item()) as resp:
            if resp.status_code == 422:
                resp.success()
            elif not is_transient(resp):
                resp.failure(f"Expected MOQ rejection, got {resp.status_code}")

    @task
    def remove_item(self):
        if self.state.product_ids:
            self.client.delete(
                f"/cart/items/{self.state.product_ids[0]}",
                headers=self.state.headers,
                name="DELETE /cart/items/{id}",
            )

    @task
    def clear(self):
        self.client.delete("/cart", headers=self.state.headers, name="DELETE /cart")
        self.interrupt()


class CheckoutJourney(_SignedInJourney):
    """Add Items -> Validate -> Payment Intent -> Confirm -> Place Order -> Track."""

    @task
    def fill_cart(self):
        for _ in range(2):
            with self.add_item(cart_item_data()) as resp:
                if resp.status_code == 200:
                    self.state.cart_total = resp.json()["total"]
                elif not is_transient(resp):
                    resp.failure(f"Add item failed: {resp.status_code} {extract_error_detail(resp)}")
        if not self.state.cart_total:
            self.interrupt()

    @task
    def validate(self):
        with self.client.post(
            "/cart/validate",
            headers=self.state.headers,
            catch_response=True,
            name="POST /cart/validate",
        ) as resp:
            if resp.status_code != 200 or not resp.json()["valid"]:
                resp.failure(f"Cart invalid: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def pay(self):
        resp = _with_retries(
            lambda: self.client.post(
                "/payments/intents",
                json={"amount": self.state.cart_total},
                headers=self.state.headers,
                catch_response=True,
                name="POST /payments/intents",
            )
        )
        with resp:
            if resp.status_code != 201:
                resp.failure(f"Payment intent failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()
            secret = resp.json()["client_secret"]

        with self.client.post(
            "/payments/confirm",
            json={"client_secret": secret},
            headers=self.state.headers,
            catch_response=True,
            name="POST /payments/confirm",
        ) as resp:
            if resp.status_code == 200:
                self.state.payment_reference = resp.json()["payment_reference"]
            elif resp.status_code == 402:
                # Declined cards are part of the simulated traffic
                resp.success()
                self.interrupt()
            else:
                resp.failure(f"Confirm failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def place_order(self):
        resp = _with_retries(
            lambda: self.client.post(
                "/orders",
                json=checkout_data(self.state.payment_reference),
                headers=self.state.headers,
                catch_response=True,
                name="POST /orders",
            )
        )
        with resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["id"]
            else:
                resp.failure(f"Place order failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def track(self):
        for _ in range(3):
            self.client.get(f"/orders/{self.state.order_id}", headers=self.state.headers, name="GET /orders/{id}")
        self.client.get("/orders", headers=self.state.headers, name="GET /orders")
        self.interrupt()


class OrderingUser(HttpUser):
    wait_time = between(1.0, 3.0)
    tasks = {CartAbandonmentJourney: 2, CheckoutJourney: 1}
