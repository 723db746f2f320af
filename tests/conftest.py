"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from tea_api.config import Settings
from tea_api.main import create_app
from tea_api.store import MemoryStore


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, environment="test")


@pytest.fixture
def store():
    """A fresh, empty store for each test."""
    return MemoryStore()


@pytest.fixture
def client(store, settings):
    """Create a test client around the test's store."""
    app = create_app(store=store, settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def teapot(client):
    """Create a teapot and return its JSON."""
    response = client.post(
        "/teapots",
        json={"name": "My Kyusu", "material": "clay", "capacityMl": 350, "style": "kyusu"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def tea(client):
    """Create a tea and return its JSON."""
    response = client.post(
        "/teas",
        json={"name": "Dragon Well", "type": "green", "steepTempCelsius": 80, "steepTimeSeconds": 120},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def brew(client, teapot, tea):
    """Create a brew of the tea in the teapot and return its JSON."""
    response = client.post("/brews", json={"teapotId": teapot["id"], "teaId": tea["id"]})
    assert response.status_code == 201
    return response.json()
