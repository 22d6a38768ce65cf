"""Integration tests for the auth and address endpoints via TestClient."""

import random

from breadboard.config import configure
from breadboard.shared.faults import FaultInjector, set_injector


def _register(client, **overrides):
    payload = {
        "company_name": "Harbor Bistro",
        "contact_name": "Ava Brooks",
        "email": "orders@harborbistro.com",
        "phone": "555-0142",
        "password": "harbor-pass",
    }
    payload.update(overrides)
    return client.post("/auth/register", json=payload)


class TestRegisterAPI:
    def test_register_returns_user_and_tokens(self, client):
        response = _register(client)

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "orders@harborbistro.com"
        assert body["user"]["is_email_verified"] is False
        assert body["tokens"]["access_token"]
        assert body["tokens"]["refresh_token"]

    def test_duplicate_registration(self, client):
        _register(client)
        response = _register(client)

        assert response.status_code == 409
        assert response.json() == {
            "message": "User already exists",
            "code": "USER_EXISTS",
            "details": {},
            "transient": False,
        }

    def test_register_server_error_injected(self, client):
        configure(faults_enabled=True, min_delay_seconds=0.0, max_delay_seconds=0.0)
        configure(rate_limit_rate=0.0, server_error_rate=1.0)
        set_injector(FaultInjector(random.Random(0)))

        response = _register(client)

        assert response.status_code == 503
        assert response.json()["code"] == "SERVER_ERROR"


class TestLoginAPI:
    def test_login_and_me(self, client, auth_headers):
        response = client.get("/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["company_name"] == "Sunrise Cafe"

    def test_bad_credentials(self, client):
        response = client.post("/auth/login", json={"email": "buyer@sunrisecafe.com", "password": "bad"})

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_me_requires_token(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "AUTH_REQUIRED"

    def test_me_rejects_malformed_header(self, client):
        response = client.get("/auth/me", headers={"Authorization": "Token abc"})

        assert response.status_code == 401


class TestOtpAPI:
    def test_send_and_verify(self, client):
        _register(client)

        assert client.post("/auth/otp/send", json={"email": "orders@harborbistro.com"}).status_code == 200
        response = client.post("/auth/otp/verify", json={"email": "orders@harborbistro.com", "otp": "123456"})

        assert response.status_code == 200
        assert response.json()["user"]["is_email_verified"] is True

    def test_invalid_otp(self, client):
        response = client.post("/auth/otp/verify", json={"email": "buyer@sunrisecafe.com", "otp": "999999"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_OTP"


class TestSessionAPI:
    def test_refresh(self, client):
        login = client.post("/auth/login", json={"email": "buyer@sunrisecafe.com", "password": "password123"})
        refresh_token = login.json()["tokens"]["refresh_token"]

        response = client.post("/auth/refresh", json={"refresh_token": refresh_token})

        assert response.status_code == 200
        assert response.json()["tokens"]["refresh_token"] != refresh_token

    def test_refresh_unknown(self, client):
        response = client.post("/auth/refresh", json={"refresh_token": "bb_refresh_nope"})

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_logout_invalidates_token(self, client, auth_headers):
        assert client.post("/auth/logout", headers=auth_headers).status_code == 200

        assert client.get("/auth/me", headers=auth_headers).status_code == 401


class TestAddressesAPI:
    def test_list_addresses(self, client, auth_headers):
        response = client.get("/addresses", headers=auth_headers)

        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == ["addr-001", "addr-002"]

    def test_addresses_require_auth(self, client):
        assert client.get("/addresses").status_code == 401


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok", "domain": "breadboard"}
