"""
Shared pytest configuration.

Settings are read once at import time, so the test environment is
fixed here before the application package is imported.
"""

import os
import uuid

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tradehub.main import app  # noqa: E402

DEFAULT_PASSWORD = "s3cret-pass"


@pytest.fixture(scope="session")
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def new_user(client: TestClient) -> dict:
    """Sign up a fresh user.

    Returns the sign-up response body plus the plain-text password.
    """
    response = client.post(
        "/api/auth/signup",
        json={
            "email": f"user-{uuid.uuid4().hex[:12]}@example.com",
            "password": DEFAULT_PASSWORD,
            "fullName": "Test User",
        },
    )
    assert response.status_code == 201, response.text
    body = response.json()
    body["password"] = DEFAULT_PASSWORD
    return body


@pytest.fixture
def auth_headers(new_user: dict) -> dict[str, str]:
    return {"Authorization": f"Bearer {new_user['token']}"}
