"""Shared fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from catalog_console.domain import SequentialIdGenerator, set_id_generator
from catalog_console.infrastructure.config import settings
from catalog_console.main import app


@pytest.fixture(autouse=True)
def sequential_ids() -> None:
    """Issue predictable ids (tab_1, service_1, C1) in API tests."""
    set_id_generator(SequentialIdGenerator())


@pytest.fixture
def client() -> TestClient:
    """Create test client without authentication."""
    return TestClient(app)


@pytest.fixture
def auth_client() -> TestClient:
    """Create test client with valid API key authentication."""
    return TestClient(
        app,
        headers={"Authorization": f"Bearer {settings.console_api_key}"},
    )


@pytest.fixture
def session_id(auth_client: TestClient) -> str:
    """Start a draft session and return its ID."""
    response = auth_client.post("/drafts")
    assert response.status_code == 201
    return response.json()["sessionId"]
