from unittest.mock import MagicMock

import pytest
from flask import Flask

from vortex_demo_core import create_app


@pytest.fixture
def audit_log_path(tmp_path):
    return tmp_path / "audit.log"


@pytest.fixture
def vortex_client():
    return MagicMock(name="vortex_client")


@pytest.fixture
def test_config(audit_log_path) -> dict:
    return {
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "RATELIMIT_ENABLED": False,
        "AUDIT_LOG_PATH": str(audit_log_path),
        "VORTEX_API_KEY": "test-api-key",
        "VORTEX_BASE_URL": None,
    }


@pytest.fixture(name="flask_app")
def app(test_config, vortex_client) -> Flask:
    return create_app(test_config, vortex_client=vortex_client)


@pytest.fixture
def client(flask_app: Flask):
    return flask_app.test_client()


def _login(flask_app: Flask, email: str, password: str):
    test_client = flask_app.test_client()
    resp = test_client.post("/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200
    return test_client


@pytest.fixture
def logged_in_client(flask_app: Flask):
    """Client logged in as the auto-join admin."""
    return _login(flask_app, "admin@example.com", "password123")


@pytest.fixture
def user_client(flask_app: Flask):
    """Client logged in as the regular user."""
    return _login(flask_app, "user@example.com", "userpass")
