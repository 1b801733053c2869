"""
Integration tests for the Python API client, driven through the test client.
"""

import pytest
from taskboard.client import ApiError, ClientSession, TaskboardClient, TokenStore


@pytest.fixture
def session(tmp_path):
    return ClientSession(TokenStore(tmp_path / "token"))


@pytest.fixture
def api(client, session):
    return TaskboardClient(session, http=client)


class TestTaskboardClient:
    """Test cases for TaskboardClient."""

    def test_full_flow(self, api, session):
        registered = api.register("Ana", "ana@x.com", "secret123")
        assert registered["email"] == "ana@x.com"

        api.login("ana@x.com", "secret123")
        assert session.is_authenticated
        assert session.current_user.id == registered["id"]
        assert not session.is_admin

        task = api.create_task("Write spec")
        assert task["status"] == "pending"
        assert [t["id"] for t in api.list_tasks()] == [task["id"]]

        updated = api.update_status(task["id"], "completed")
        assert updated["status"] == "completed"
        assert api.get_task(task["id"])["status"] == "completed"
        assert api.list_tasks(status="completed")[0]["id"] == task["id"]
        assert api.task_stats()["completed"] == 1

        api.delete_task(task["id"])
        assert api.list_tasks() == []

    def test_token_survives_restart(self, api, client, tmp_path):
        api.register("Ana", "ana@x.com", "secret123")
        api.login("ana@x.com", "secret123")
        api.create_task("Persisted")

        restarted = ClientSession(TokenStore(tmp_path / "token"))
        restarted.load()
        other = TaskboardClient(restarted, http=client)

        assert [t["title"] for t in other.list_tasks()] == ["Persisted"]

    def test_logout(self, api, session):
        api.register("Ana", "ana@x.com", "secret123")
        api.login("ana@x.com", "secret123")

        api.logout()

        assert not session.is_authenticated
        with pytest.raises(ApiError) as exc_info:
            api.list_tasks()
        assert exc_info.value.status_code == 401

    def test_bad_login(self, api, session):
        with pytest.raises(ApiError) as exc_info:
            api.login("nobody@x.com", "secret123")

        assert exc_info.value.status_code == 401
        assert exc_info.value.error == "UNAUTHORIZED"
        assert exc_info.value.message == "Invalid credentials"
        assert session.token is None

    def test_duplicate_registration(self, api):
        api.register("Ana", "ana@x.com", "secret123")

        with pytest.raises(ApiError) as exc_info:
            api.register("Ana", "ana@x.com", "secret123")

        assert exc_info.value.status_code == 401
        assert exc_info.value.error == "CONFLICT"

    def test_not_found(self, api):
        api.register("Ana", "ana@x.com", "secret123")
        api.login("ana@x.com", "secret123")

        with pytest.raises(ApiError) as exc_info:
            api.update_status("missing", "completed")

        assert exc_info.value.status_code == 404
