"""
Integration tests for the admin-only user listing.
"""

import pytest
from fastapi.testclient import TestClient

from taskboard.main import create_application


class TestListUsers:
    """GET /users"""

    def test_requires_token(self, client):
        assert client.get("/users").status_code == 401

    def test_regular_user_forbidden(self, client, auth_headers):
        response = client.get("/users", headers=auth_headers("ana@x.com"))

        assert response.status_code == 403
        assert response.json()["error"] == "FORBIDDEN"


class TestFirstUserAdminBootstrap:
    """With FIRST_USER_IS_ADMIN the first registration becomes an admin."""

    @pytest.fixture
    def client(self, settings):
        settings = settings.model_copy(update={"first_user_is_admin": True})
        with TestClient(create_application(settings)) as test_client:
            yield test_client

    def test_admin_lists_users(self, client, auth_headers):
        admin = auth_headers("root@x.com")
        auth_headers("ana@x.com")
        auth_headers("bob@x.com")

        response = client.get("/users", headers=admin)

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 3
        assert body["admins"] == 1
        assert body["users"] == 2
        assert {item["email"] for item in body["items"]} == {"root@x.com", "ana@x.com", "bob@x.com"}
        assert all("password_hash" not in item for item in body["items"])

    def test_second_user_is_not_admin(self, client, auth_headers):
        auth_headers("root@x.com")
        ana = auth_headers("ana@x.com")

        assert client.get("/auth/profile", headers=ana).json()["role"] == "user"
        assert client.get("/users", headers=ana).status_code == 403
