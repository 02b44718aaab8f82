"""API test fixtures.

Each test gets empty tables and an empty stub mailbox. The app runs on the
SQLite file configured in tests/conftest.py.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from src.core.container import get_database, get_email_service
from src.main import app

API = settings.api_v1_prefix
SUPER_ADMIN_HEADERS = {"X-Super-Admin-Key": "test-super-admin-key"}


async def _reset_database() -> None:
    database = get_database()
    await database.drop_all()
    await database.create_all()
    await database.close()


@pytest.fixture
def client():
    """TestClient on clean tables (lifespan runs per test)."""
    asyncio.run(_reset_database())
    get_email_service().sent.clear()
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mailbox() -> list[dict]:
    """Messages captured by the stub email sender."""
    return get_email_service().sent


def last_code(mailbox: list[dict], email: str) -> str:
    message = next(m for m in reversed(mailbox) if m["to_email"] == email)
    return message["data"]["code"]


def create_institution(client: TestClient, code: str = "MIT", name: str = "MIT") -> dict:
    response = client.post(
        f"{API}/superadmin/institutions",
        json={"name": name, "code": code, "domain": "mit.edu"},
        headers=SUPER_ADMIN_HEADERS,
    )
    assert response.status_code == 201, response.text
    return response.json()["institution"]


def register_verified_admin(
    client: TestClient,
    mailbox: list[dict],
    email: str = "grace@mit.edu",
    password: str = "Cobol1959",
    institution_code: str = "MIT",
) -> dict:
    """Register and verify an admin, then log in. Returns the login body."""
    response = client.post(
        f"{API}/auth/admin/register",
        json={
            "institution_code": institution_code,
            "first_name": "Grace",
            "last_name": "Hopper",
            "email": email,
            "password": password,
            "confirm_password": password,
        },
    )
    assert response.status_code == 201, response.text
    verified = client.post(
        f"{API}/auth/verify-otp", json={"email": email, "code": last_code(mailbox, email)}
    )
    assert verified.status_code == 200, verified.text
    login = client.post(
        f"{API}/auth/login",
        json={"identifier": email, "password": password, "role": "admin"},
    )
    assert login.status_code == 200, login.text
    return login.json()


def bearer(login_body: dict) -> dict[str, str]:
    return {"Authorization": f"Bearer {login_body['access_token']}"}
