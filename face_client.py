"""Face Store API client.

This module defines a small client wrapper around the REST API served by
``face_api``.  The client uses the ``requests`` library internally to
make HTTP calls and exposes one method per operation:

* :meth:`create_face` – store a new face and return its id.
* :meth:`get_face` – fetch a single face by its identifier.
* :meth:`list_faces` – return every stored face.
* :meth:`delete_face` – delete a single face.
* :meth:`delete_all_faces` – delete every face.
* :meth:`faces_by_tag` – return the faces carrying a tag.
* :meth:`faces_by_due_date` – return the faces due on a calendar date.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``error`` is a dictionary with the keys
``status_code`` and ``message`` and ``result`` holds an empty value.

The base URL defaults to the ``FACE_API_BASE_URL`` environment variable
and falls back to ``http://localhost:8080``.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"

Error = Dict[str, Any]


class FaceAPI:
    """Client for interacting with the Face Store API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
                Defaults to ``FACE_API_BASE_URL`` or :data:`DEFAULT_BASE_URL`.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        base_url = base_url or os.getenv("FACE_API_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST`` or ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/face/``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for an empty body) and ``error``
            is ``None``. On failure, ``data`` is ``None`` and ``error`` is
            a dictionary with keys ``status_code`` and ``message``.
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
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Face operations
    # ------------------------------------------------------------------
    def create_face(
        self, text: str, tags: Iterable[str], due: Union[datetime, str]
    ) -> Tuple[Optional[int], Optional[Error]]:
        """Create a face.

        Args:
            text: Free text of the face.
            tags: Tags to attach.
            due: Due timestamp; a timezone aware ``datetime`` or an
                RFC 3339 string.
        Returns:
            A tuple ``(face_id, error)``.
        """
        payload = {
            "text": text,
            "tags": list(tags),
            "due": due.isoformat() if isinstance(due, datetime) else due,
        }
        data, error = self._request("POST", "/face/", json_body=payload)
        if error:
            return None, error
        return data["id"], None

    def get_face(self, face_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single face by ID."""
        return self._request("GET", f"/face/{face_id}")

    def list_faces(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all faces."""
        return self._list("/face/")

    def delete_face(self, face_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a face.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"/face/{face_id}")
        return error is None, error

    def delete_all_faces(self) -> Tuple[bool, Optional[Error]]:
        """Delete every face."""
        _, error = self._request("DELETE", "/face/")
        return error is None, error

    def faces_by_tag(self, tag: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the faces carrying ``tag``.

        The server routes ``/tag/<tag>`` on the decoded path, so a tag
        containing ``/`` cannot be addressed even when percent-encoded.
        Such tags are refused here without a request; the error has
        ``status_code`` ``None``.
        """
        if "/" in tag:
            message = f"tag {tag!r} contains '/' and cannot be queried"
            logger.error("Refusing tag query: %s", message)
            return [], {"status_code": None, "message": message}
        return self._list(f"/tag/{quote(tag, safe='')}")

    def faces_by_due_date(
        self, year: int, month: int, day: int
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the faces due on the given calendar date."""
        return self._list(f"/due/{year}/{month}/{day}")
