# tests/test_dashboard.py

"""
Tests for dashboard endpoints.
"""

from fastapi.testclient import TestClient


def test_dashboard_requires_login(client: TestClient):
    response = client.get("/dashboard")

    assert response.status_code == 401
    assert response.json()["detail"] == "Not logged in"


def test_manager_dashboard(manager_client: TestClient):
    data = manager_client.get("/dashboard").json()

    assert data["role"] == "property_manager"
    assert len(data["properties"]) == 5
    assert len(data["service_requests"]) == 4
    assert data["analytics"]["monthly_revenue"] == 8000


def test_tenant_dashboard(tenant_client: TestClient):
    data = tenant_client.get("/dashboard").json()

    assert data["role"] == "tenant"
    assert data["property"]["id"] == "1"
    assert {r["tenant_id"] for r in data["service_requests"]} == {"2"}
    assert {d["tenant_id"] for d in data["documents"]} == {"2"}


def test_provider_dashboard(provider_client: TestClient):
    data = provider_client.get("/dashboard").json()

    assert data["role"] == "service_provider"
    assert [w["id"] for w in data["work_orders"]] == ["1"]
    assert data["completed_jobs"] == []


def test_stats(manager_client: TestClient):
    data = manager_client.get("/dashboard/stats").json()

    assert data["total_properties"] == 5
    assert data["occupancy_rate"] == 40


def test_notifications_and_messages(tenant_client: TestClient):
    notifications = tenant_client.get("/dashboard/notifications").json()
    messages = tenant_client.get("/dashboard/messages").json()

    assert [n["id"] for n in notifications] == ["2"]
    assert [m["id"] for m in messages] == ["2", "1"]
