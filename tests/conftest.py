import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before the domain module is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path or "/bdd/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def caterly_bed():
    from caterly.domain import caterly

    bed = DomainFixture(caterly)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(scope="session", autouse=True)
def setup_db(caterly_bed):
    from caterly.domain import caterly
    from caterly.utils.db import drop_db, setup_db

    setup_db(caterly)

    yield

    drop_db(caterly)


@pytest.fixture(autouse=True)
def _ctx(caterly_bed):
    with caterly_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def run_around_tests(_ctx):
    """Cleanup infrastructure and swapped adapters after every test"""
    yield

    from protean import current_domain

    from caterly.ordering.catalogue import reset_lookup

    reset_lookup()

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------
@pytest.fixture()
def register_account():
    """Register an account through the command pipeline and return its id."""
    from protean import current_domain

    from caterly.identity.authentication import hash_password
    from caterly.identity.registration import RegisterAccount

    counter = {"n": 0}

    def _register(role="user", username=None, phone=None, password="secret-pass", **profile):
        counter["n"] += 1
        if role == "caterer":
            profile.setdefault("business_name", f"Kitchen {counter['n']}")
            profile.setdefault("business_address", f"{counter['n']} Market Street")
        command = RegisterAccount(
            username=username or f"{role}-{counter['n']}",
            phone=phone or f"+1-555-{counter['n']:04d}-{role[:1]}",
            password_hash=hash_password(password),
            role=role,
            **profile,
        )
        return current_domain.process(command, asynchronous=False)

    return _register


@pytest.fixture()
def create_recipe():
    """Create a recipe owned by ``owner_id`` and return its id."""
    from protean import current_domain

    from caterly.catalogue.management import CreateRecipe

    def _create(owner_id, name="Jollof Rice", price=10.0, category="Mains", description="Party-style jollof"):
        command = CreateRecipe(
            owner_id=owner_id,
            name=name,
            description=description,
            price=price,
            category=category,
        )
        return current_domain.process(command, asynchronous=False)

    return _create


@pytest.fixture()
def delivery_address():
    return {
        "first_name": "Ada",
        "last_name": "Obi",
        "email": "ada@example.com",
        "street": "4 Palm Avenue",
        "city": "Lagos",
        "state": "LA",
        "zipcode": "100001",
        "country": "NG",
        "phone": "+234-800-000-0000",
    }


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from caterly.api import create_app

    return TestClient(create_app())


@pytest.fixture()
def signup(client):
    """Register over HTTP, log in, and return ``(account_id, headers)``."""
    counter = {"n": 0}

    def _signup(role="user", password="secret-pass", **extra):
        counter["n"] += 1
        phone = extra.pop("phone", f"+44-700-{counter['n']:04d}-{role[:1]}")
        body = {"username": f"{role}-{counter['n']}", "phone": phone, "password": password, "role": role, **extra}
        if role == "caterer":
            body.setdefault("business_name", f"Kitchen {counter['n']}")
            body.setdefault("business_address", f"{counter['n']} High Street")

        response = client.post("/auth/register", json=body)
        assert response.status_code == 201, response.text
        token = client.post("/auth/login", json={"phone": phone, "password": password}).json()["token"]
        return response.json()["account_id"], {"Authorization": f"Bearer {token}"}

    return _signup
