"""Coursework API client.

A thin wrapper around the REST endpoints served by ``coursework_api``,
using the ``requests`` library.  It plays the role the browser front
ends play in the course: fetching the phonebook, listing and adding
blog entries, and clicking the feedback buttons.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is ``None`` (or an empty
list for listings) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  The client never raises for HTTP or
connection errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CourseworkClient:
    """Client for the phonebook, blog list and feedback endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3001``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
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
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/api/persons``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Phonebook
    # ------------------------------------------------------------------
    def list_persons(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every contact in the phonebook."""
        data, error = self._request("GET", "/api/persons")
        if error:
            return [], error
        return data or [], None

    def get_person(self, person_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single contact by ID."""
        return self._request("GET", f"/api/persons/{person_id}")

    # ------------------------------------------------------------------
    # Blog list
    # ------------------------------------------------------------------
    def list_blogs(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all blog entries."""
        data, error = self._request("GET", "/api/blogs/")
        if error:
            return [], error
        return data or [], None

    def create_blog(
        self,
        title: str,
        author: str,
        url: str,
        likes: Optional[int] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a blog entry.

        ``likes`` is only sent when given; the server defaults it to 0.
        """
        payload: Dict[str, Any] = {"title": title, "author": author, "url": url}
        if likes is not None:
            payload["likes"] = likes
        return self._request("POST", "/api/blogs/", json_body=payload)

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------
    def get_feedback(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve the feedback counters and statistics."""
        return self._request("GET", "/api/feedback")

    def record_feedback(self, kind: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Click one of the feedback buttons (``good``, ``neutral`` or ``bad``)."""
        return self._request("POST", f"/api/feedback/{kind}")
