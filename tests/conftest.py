import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Initialize the breadboard domain once; every test then runs inside its
    own domain context against freshly seeded in-memory data.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from breadboard.domain import breadboard

    breadboard.init()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Push the domain context, seed the store, and clean up after every test."""
    from breadboard.catalogue.moq import reset_policy
    from breadboard.config import configure, reset_settings
    from breadboard.domain import breadboard
    from breadboard.ordering.order.tracking import reset_simulator
    from breadboard.payments.gateway import reset_gateway
    from breadboard.seed import seed_storefront
    from breadboard.shared.faults import reset_injector

    ctx = breadboard.domain_context()
    ctx.push()

    configure(faults_enabled=False)
    seed_storefront()

    yield

    from protean import current_domain

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()

    ctx.pop()

    reset_settings()
    reset_policy()
    reset_gateway()
    reset_injector()
    reset_simulator()


@pytest.fixture()
def buyer_id():
    """The seeded demo buyer."""
    return "user-001"


@pytest.fixture()
def other_buyer():
    """A second registered buyer with no orders."""
    from breadboard.identity.registration import RegisterUser
    from protean import current_domain

    result = current_domain.process(
        RegisterUser(
            company_name="Harbor Bistro",
            contact_name="Ava Brooks",
            email="orders@harborbistro.com",
            phone="555-0142",
            password="harbor-pass",
        ),
        asynchronous=False,
    )
    return result


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from breadboard.app import build_app

    return TestClient(build_app())


@pytest.fixture()
def auth_headers(client):
    """Bearer headers for the seeded demo buyer."""
    response = client.post("/auth/login", json={"email": "buyer@sunrisecafe.com", "password": "password123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['tokens']['access_token']}"}
