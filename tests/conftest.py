# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from typing import Generator

from main import create_app
from core.storage import MemoryStorage
from services.session_manager import SessionManager


@pytest.fixture
def storage() -> MemoryStorage:
    """Fresh in-memory session storage."""
    return MemoryStorage()


@pytest.fixture
def session_manager(storage) -> SessionManager:
    """Session manager with no artificial login delay, already restored."""
    manager = SessionManager(storage=storage, login_delay=0)
    manager.restore_session()
    return manager


@pytest.fixture(scope="function")
def app(storage):
    """Create a test FastAPI application instance."""
    return create_app(storage=storage, login_delay=0)


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def manager_client(client: TestClient) -> TestClient:
    """Client logged in as the demo property manager."""
    response = client.post("/auth/switch/1")
    assert response.status_code == 200
    return client


@pytest.fixture
def tenant_client(client: TestClient) -> TestClient:
    """Client logged in as the demo tenant (Mike Chen)."""
    response = client.post("/auth/switch/2")
    assert response.status_code == 200
    return client


@pytest.fixture
def provider_client(client: TestClient) -> TestClient:
    """Client logged in as ABC Plumbing Services."""
    response = client.post("/auth/switch/3")
    assert response.status_code == 200
    return client
