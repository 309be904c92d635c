# tests/test_auth.py

"""
Tests for authentication endpoints.
"""

import json
from fastapi.testclient import TestClient

from core.storage import CURRENT_USER_KEY, USER_DATA_KEY
from mock_data import DEMO_PASSWORD


def test_session_starts_logged_out(client: TestClient):
    response = client.get("/auth/session")

    assert response.status_code == 200
    data = response.json()
    assert data["user"] is None
    assert data["user_data"] is None
    assert data["is_loading"] is False


def test_login_success(client: TestClient, storage):
    """Test successful login with any password."""
    response = client.post(
        "/auth/login",
        json={"email": "sarah@propertymanagement.com", "password": "anything"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["name"] == "Sarah Johnson"
    assert data["user"]["role"] == "property_manager"
    assert data["user_data"]["role"] == "property_manager"
    assert len(data["user_data"]["properties"]) == 5
    assert storage.get_item(CURRENT_USER_KEY) is not None


def test_login_invalid_credentials(client: TestClient):
    """Test login with an email that is not a demo account."""
    response = client.post(
        "/auth/login",
        json={"email": "test@example.com", "password": "password123"}
    )

    assert response.status_code == 401
    assert "Invalid email or password" in response.json()["detail"]
    assert client.get("/auth/session").json()["user"] is None


def test_login_requires_both_fields(client: TestClient):
    response = client.post("/auth/login", json={"email": "mike.chen@email.com"})
    assert response.status_code == 422


def test_logout(client: TestClient, storage):
    client.post("/auth/login", json={"email": "mike.chen@email.com", "password": DEMO_PASSWORD})

    response = client.post("/auth/logout")

    assert response.status_code == 200
    assert response.json()["user"] is None
    assert storage.get_item(CURRENT_USER_KEY) is None
    assert storage.get_item(USER_DATA_KEY) is None

    # second logout is harmless
    assert client.post("/auth/logout").status_code == 200


def test_switch_user(client: TestClient):
    response = client.post("/auth/switch/3")

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == "3"
    assert data["user"]["name"] == "ABC Plumbing Services"
    assert [w["assigned_provider_id"] for w in data["user_data"]["work_orders"]] == ["3"]


def test_switch_unknown_user(tenant_client: TestClient):
    response = tenant_client.post("/auth/switch/999")

    assert response.status_code == 404
    assert tenant_client.get("/auth/session").json()["user"]["id"] == "2"


def test_demo_accounts(client: TestClient):
    response = client.get("/auth/demo-accounts")

    assert response.status_code == 200
    emails = [a["email"] for a in response.json()]
    assert emails == [
        "sarah@propertymanagement.com",
        "mike.chen@email.com",
        "contact@abcplumbing.com",
    ]


def test_session_restored_on_startup(storage):
    """A session persisted by one app instance is picked up by the next."""
    from main import create_app

    with TestClient(create_app(storage=storage, login_delay=0)) as first:
        first.post("/auth/switch/4")

    with TestClient(create_app(storage=storage, login_delay=0)) as second:
        data = second.get("/auth/session").json()

    assert data["user"]["name"] == "Lisa Rodriguez"
    assert data["user_data"]["property"]["id"] == "3"


def test_corrupted_storage_on_startup(storage):
    from main import create_app

    storage.set_item(CURRENT_USER_KEY, "not-json")
    storage.set_item(USER_DATA_KEY, json.dumps({"role": "tenant"}))

    with TestClient(create_app(storage=storage, login_delay=0)) as client:
        data = client.get("/auth/session").json()

    assert data["user"] is None
    assert storage.keys() == []
