"""
Integration tests for user REST API endpoints.

Tests:
- POST /users - Register user
- GET /users/{id} - Get user by id
- PATCH /users/{id}/pro - Upgrade to pro plan
"""

import pytest
from fastapi.testclient import TestClient

from main import app
from app.core.todo import is_valid_uuid
from app.core.user_store import get_user_store


@pytest.fixture
def client():
    """Create FastAPI test client."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def reset_user_store():
    """Reset user store before each test."""
    get_user_store().clear()
    yield


class TestCreateUser:
    """Test POST /users endpoint."""

    def test_create_user(self, client):
        """Test registering a new user."""
        response = client.post("/users", json={"name": "Ana", "username": "ana"})

        assert response.status_code == 201
        data = response.json()
        assert is_valid_uuid(data["id"])
        assert data["name"] == "Ana"
        assert data["username"] == "ana"
        assert data["pro"] is False
        assert data["todos"] == []

    def test_create_user_duplicate_username(self, client):
        """Test registering a taken username."""
        client.post("/users", json={"name": "Ana", "username": "ana"})

        response = client.post("/users", json={"name": "Other", "username": "ana"})

        assert response.status_code == 400
        assert response.json() == {"error": "Username already exists"}

    def test_create_user_duplicate_after_other_users(self, client):
        """Test duplicates are caught regardless of registration order."""
        client.post("/users", json={"name": "Ana", "username": "ana"})
        client.post("/users", json={"name": "Bob", "username": "bob"})
        client.post("/users", json={"name": "Cid", "username": "cid"})

        response = client.post("/users", json={"name": "Ana", "username": "ana"})

        assert response.status_code == 400
        assert get_user_store().user_count() == 3

    def test_create_user_username_case_sensitive(self, client):
        """Test usernames that differ only in case are both accepted."""
        first = client.post("/users", json={"name": "Ana", "username": "ana"})
        second = client.post("/users", json={"name": "Ana", "username": "ANA"})

        assert first.status_code == 201
        assert second.status_code == 201
        assert first.json()["id"] != second.json()["id"]

    def test_create_user_missing_field(self, client):
        """Test a body without username is rejected."""
        response = client.post("/users", json={"name": "Ana"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"


class TestGetUser:
    """Test GET /users/{id} endpoint."""

    def test_get_user(self, client):
        """Test fetching a user by id."""
        created = client.post("/users", json={"name": "Ana", "username": "ana"}).json()

        response = client.get(f"/users/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_user_includes_todos(self, client):
        """Test the user body embeds their todos."""
        created = client.post("/users", json={"name": "Ana", "username": "ana"}).json()
        todo = client.post(
            "/todos",
            headers={"username": "ana"},
            json={"title": "Buy milk", "deadline": "2024-01-01"}
        ).json()

        response = client.get(f"/users/{created['id']}")

        assert response.json()["todos"] == [todo]

    def test_get_user_not_found(self, client):
        """Test fetching an unknown id."""
        response = client.get("/users/109156be-c4fb-41ea-b1b4-efe1671c5836")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found."}

    def test_get_user_by_username_is_not_id(self, client):
        """Test the path is matched against ids, not usernames."""
        client.post("/users", json={"name": "Ana", "username": "ana"})

        response = client.get("/users/ana")

        assert response.status_code == 404


class TestUpgradeToPro:
    """Test PATCH /users/{id}/pro endpoint."""

    def test_upgrade_to_pro(self, client):
        """Test upgrading a free user."""
        created = client.post("/users", json={"name": "Ana", "username": "ana"}).json()

        response = client.patch(f"/users/{created['id']}/pro")

        assert response.status_code == 200
        data = response.json()
        assert data["pro"] is True
        assert data["id"] == created["id"]

    def test_upgrade_twice(self, client):
        """Test a second upgrade is rejected and the user stays pro."""
        created = client.post("/users", json={"name": "Ana", "username": "ana"}).json()
        client.patch(f"/users/{created['id']}/pro")

        response = client.patch(f"/users/{created['id']}/pro")

        assert response.status_code == 400
        assert response.json() == {"error": "Pro plan is already activated."}
        assert client.get(f"/users/{created['id']}").json()["pro"] is True

    def test_upgrade_unknown_user(self, client):
        """Test upgrading an unknown id."""
        response = client.patch("/users/109156be-c4fb-41ea-b1b4-efe1671c5836/pro")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found."}
