"""
HTTP client for a running todokeeper server.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class TodoApiError(Exception):
    """The server answered with an unexpected status code."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}")


class TodoApiClient:
    def __init__(self, base_url: str = "http://127.0.0.1:3000", timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _make_request(self, method: str, endpoint: str,
                      data: Optional[Dict[str, Any]] = None) -> requests.Response:
        """Make an HTTP request to the API."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        headers = {"Content-Type": "application/json"}
        logger.debug(f"{method} {url} {data if data is not None else ''}")
        response = self.session.request(method, url, headers=headers, json=data, timeout=self.timeout)
        if response.status_code >= 400:
            raise TodoApiError(response.status_code, response.text or response.reason)
        return response

    def list_todos(self) -> List[Dict[str, Any]]:
        return self._make_request("GET", "todos").json()

    def get_todo(self, todo_id: str) -> Dict[str, Any]:
        return self._make_request("GET", f"todos/{todo_id}").json()

    def create_todo(self, title: str, description: str, completed: bool = False) -> str:
        """Create a todo and return its new id."""
        data = {"title": title, "description": description, "completed": completed}
        return self._make_request("POST", "todos", data).json()["id"]

    def update_todo(self, todo_id: str, title: Optional[str] = None,
                    description: Optional[str] = None,
                    completed: Optional[bool] = None) -> Dict[str, Any]:
        """Send a partial update. Leaving ``completed`` out resets it on the server."""
        data: Dict[str, Any] = {}
        if title is not None:
            data["title"] = title
        if description is not None:
            data["description"] = description
        if completed is not None:
            data["completed"] = completed
        return self._make_request("PUT", f"todos/{todo_id}", data).json()

    def delete_todo(self, todo_id: str) -> None:
        self._make_request("DELETE", f"todos/{todo_id}")
