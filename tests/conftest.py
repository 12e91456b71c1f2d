"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from batchportal.app import App
from batchportal.config import Config
from batchportal.core.core import Core
from batchportal.web.server import create_fastapi_app


@pytest.fixture
def config():
    """Create a config that does not depend on the environment."""
    return Config(host="127.0.0.1", port=8000, debug=True, jwt_secret="test-secret-key-for-hs256-signing")


@pytest.fixture
def core(config):
    """Create a fresh core with the admin account seeded."""
    core = Core(config)
    core.services.user.ensure_admin_user_exists()
    return core


@pytest.fixture
def app_instance(config):
    return App(config)


@pytest.fixture
def client(app_instance, config):
    """HTTP client bound to a fresh application with lifespan started."""
    with TestClient(create_fastapi_app(app_instance, config)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Authorization header for the seeded admin account."""
    response = client.post("/api/login", json={"email": "admin@test.com", "password": "password123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
