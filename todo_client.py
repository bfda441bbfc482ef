"""Todo Server API client.

A thin synchronous wrapper around the Todo Server HTTP routes, built on
the ``requests`` library.  Every method returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure ``data``
is empty and ``error`` is a dictionary with ``status_code`` and
``message`` keys.  Transport problems (connection refused, timeouts)
are logged and reported the same way instead of being raised, so
callers such as scripts and bots can handle every failure uniformly.

Example::

    api = TodoAPI(base_url="http://localhost:8080")
    api.create_todo({"id": 1, "name": "Buy milk", "completed": False})
    api.toggle_todo(1)
    todo, error = api.get_todo(1)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TodoAPI:
    """Client for the Todo Server."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON body if there is one."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    detail = err_json.get("detail") if isinstance(err_json, dict) else err_json
                    message = str(detail) if detail else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Todo operations
    # ------------------------------------------------------------------
    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all todos."""
        data, error = self._request("GET", "/todos")
        if error:
            return [], error
        return data or [], None

    def get_todo(self, todo_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single todo by ID."""
        return self._request("GET", f"/todos/{todo_id}")

    def create_todo(self, todo: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Create a todo.  ``todo`` must carry ``id``, ``name`` and ``completed``."""
        _, error = self._request("POST", "/todos", json_body=todo)
        return error is None, error

    def update_todo(self, todo: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Replace an existing todo's name and completion state."""
        _, error = self._request("PUT", "/todos", json_body=todo)
        return error is None, error

    def toggle_todo(self, todo_id: int) -> Tuple[bool, Optional[Error]]:
        """Flip the completion state of a todo."""
        _, error = self._request("POST", f"/toggle/{todo_id}")
        return error is None, error
