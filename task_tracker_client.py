"""Task Tracker API client.

A thin wrapper around the REST API served by ``task_tracker_api``.  It
uses the ``requests`` library and exposes one method per endpoint:

* :meth:`sign_up` / :meth:`sign_in` – manage the account and obtain a token.
* :meth:`list_tasks` – list own tasks, optionally filtered by status/text.
* :meth:`get_task`, :meth:`create_task`, :meth:`delete_task`.
* :meth:`update_task_status` – move a task to another status.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with ``status_code`` and ``message`` keys, so callers such as scripts or
bots can report problems without handling exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class TaskTrackerAPI:
    """Client for the Task Tracker API (``/api/v1``)."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.  The
                ``/api/v1`` prefix is added automatically.
            api_key: Optional bearer token.  :meth:`sign_in` sets it.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/") + "/api/v1"
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            return None, self._http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _http_error(exc: requests.HTTPError) -> ApiError:
        response = exc.response
        status = response.status_code if response is not None else None
        message = ""
        if response is not None:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = None
            # Validation errors carry a list of problems in ``detail``
            if isinstance(detail, list):
                message = "; ".join(str(item.get("msg", item)) for item in detail)
            elif detail:
                message = str(detail)
            else:
                message = response.text
        if not message:
            message = str(exc)
        logger.error("API request failed (%s): %s", status, message)
        return {"status_code": status, "message": message}

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def sign_up(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Register a new account; returns the created user."""
        return self._request(
            "POST", "/auth/signup", json_body={"username": username, "password": password}
        )

    def sign_in(self, username: str, password: str) -> Tuple[Optional[str], Optional[ApiError]]:
        """Obtain an access token and use it for subsequent calls."""
        data, error = self._request(
            "POST", "/auth/signin", json_body={"username": username, "password": password}
        )
        if error:
            return None, error
        self.api_key = data["access_token"]
        return self.api_key, None

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def list_tasks(
        self, status: Optional[str] = None, search: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Return the caller's tasks, optionally filtered."""
        params = {}
        if status:
            params["status"] = status
        if search:
            params["search"] = search
        data, error = self._request("GET", "/tasks", params=params or None)
        if error:
            return [], error
        return data or [], None

    def get_task(self, task_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/tasks/{task_id}")

    def create_task(self, title: str, description: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request(
            "POST", "/tasks", json_body={"title": title, "description": description}
        )

    def delete_task(self, task_id: int) -> Tuple[bool, Optional[ApiError]]:
        """Delete a task; returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/tasks/{task_id}")
        if error:
            return False, error
        return True, None

    def update_task_status(
        self, task_id: int, status: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("PATCH", f"/tasks/{task_id}/status", json_body={"status": status})
