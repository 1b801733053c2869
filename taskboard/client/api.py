"""
Taskboard API HTTP client.

Thin synchronous wrapper over httpx that attaches the session's bearer
token to every request and raises ApiError on non-2xx responses.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from taskboard.client.session import ClientSession

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-successful response from the API."""

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}: {self.message}")

    @property
    def error(self) -> Optional[str]:
        if isinstance(self.body, dict):
            return self.body.get("error")
        return None

    @property
    def message(self) -> str:
        if isinstance(self.body, dict) and "message" in self.body:
            return str(self.body["message"])
        return str(self.body)


class TaskboardClient:
    """
    HTTP client for the taskboard API.

    Either pass a base_url, or an already configured httpx.Client
    (for instance a test client) through `http`.
    """

    TIMEOUT = 10.0

    def __init__(
        self,
        session: ClientSession,
        base_url: str = "http://localhost:8000",
        http: Optional[httpx.Client] = None
    ):
        self.session = session
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=base_url.rstrip("/"), timeout=self.TIMEOUT)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "TaskboardClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = dict(kwargs.pop("headers", None) or {})
        headers.update(self.session.authorization_header())

        try:
            response = self.http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise ApiError(response.status_code, body)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Authentication

    def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        return self._request(
            "POST", "/auth/register",
            json={"name": name, "email": email, "password": password}
        )

    def login(self, email: str, password: str) -> str:
        """Log in and store the issued token in the session."""
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        token = data["access_token"]
        self.session.set_token(token)
        return token

    def logout(self) -> None:
        self.session.logout()

    def profile(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/profile")

    # Tasks

    def list_tasks(self, status: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {}
        if status:
            params["status"] = status
        if search:
            params["search"] = search
        return self._request("GET", "/tasks", params=params)

    def create_task(self, title: str, description: Optional[str] = None) -> Dict[str, Any]:
        payload = {"title": title}
        if description is not None:
            payload["description"] = description
        return self._request("POST", "/tasks", json=payload)

    def get_task(self, task_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/tasks/{task_id}")

    def update_status(self, task_id: str, status: str) -> Dict[str, Any]:
        return self._request("PATCH", f"/tasks/{task_id}/status", json={"status": status})

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", f"/tasks/{task_id}")

    def task_stats(self) -> Dict[str, int]:
        return self._request("GET", "/tasks/stats")
