"""Identity load test scenarios.

Register -> Verify OTP -> Refresh -> Me -> Logout, executed in order.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import registration_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import BuyerState

DEMO_OTP = "123456"


class NewBuyerJourney(SequentialTaskSet):
    """A new wholesale buyer signs up and confirms their email."""

    def on_start(self):
        self.state = BuyerState()
        self.email = None

    @task
    def register(self):
        payload = registration_data()
        with self.client.post("/auth/register", json=payload, catch_response=True, name="POST /auth/register") as resp:
            if resp.status_code == 201:
                tokens = resp.json()["tokens"]
                self.state.access_token = tokens["access_token"]
                self.state.refresh_token = tokens["refresh_token"]
                self.email = payload["email"]
            else:
                resp.failure(f"Register failed: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def send_otp(self):
        self.client.post("/auth/otp/send", json={"email": self.email}, name="POST /auth/otp/send")

    @task
    def verify_otp(self):
        with self.client.post(
            "/auth/otp/verify",
            json={"email": self.email, "otp": DEMO_OTP},
            catch_response=True,
            name="POST /auth/otp/verify",
        ) as resp:
            if resp.status_code == 200:
                tokens = resp.json()["tokens"]
                self.state.access_token = tokens["access_token"]
                self.state.refresh_token = tokens["refresh_token"]
            else:
                resp.failure(f"Verify OTP failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def refresh(self):
        with self.client.post(
            "/auth/refresh",
            json={"refresh_token": self.state.refresh_token},
            catch_response=True,
            name="POST /auth/refresh",
        ) as resp:
            if resp.status_code == 200:
                self.state.access_token = resp.json()["tokens"]["access_token"]
                self.state.refresh_token = resp.json()["tokens"]["refresh_token"]
            elif resp.status_code != 429:
                resp.failure(f"Refresh failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def me(self):
        self.client.get("/auth/me", headers=self.state.headers, name="GET /auth/me")

    @task
    def logout(self):
        self.client.post("/auth/logout", headers=self.state.headers, name="POST /auth/logout")
        self.interrupt()


class IdentityUser(HttpUser):
    wait_time = between(1.0, 3.0)
    tasks = [NewBuyerJourney]
