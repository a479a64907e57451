"""Seat board API client.

This module defines a thin client around the seat board REST API.  It
uses the ``requests`` library and never raises on HTTP or transport
failures; every call returns a ``(data, error)`` tuple instead so a
user interface can render failures inline:

* :meth:`SeatBoardAPI.list_seats` – fetch every seat.
* :meth:`SeatBoardAPI.book_seat` – book one seat.
* :meth:`SeatBoardAPI.reset_seats` – mark every seat available.

``error`` is ``None`` on success, otherwise a dictionary with the keys
``status_code`` (``None`` for transport failures) and ``message`` (the
server's ``error`` text when it sent one).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15

ApiError = Dict[str, Any]


class SeatBoardAPI:
    """Client for the seat board API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
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
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/seats``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
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
                    if isinstance(err_json, dict):
                        message = err_json.get("error") or err_json.get("detail") or ""
                except ValueError:
                    message = exc.response.text
            logger.warning("API request %s %s failed (%s): %s", method, path, status, message)
            return None, {"status_code": status, "message": message}
        except (requests.RequestException, ValueError) as exc:
            logger.error("API request %s %s failed: %s", method, path, exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Seat operations
    # ------------------------------------------------------------------
    def list_seats(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve every seat.

        Returns:
            A tuple ``(seats, error)``.  ``seats`` is empty on failure.
        """
        data, error = self._request("GET", "/api/seats")
        if error:
            return [], error
        if not isinstance(data, list):
            return [], {"status_code": None, "message": "Unexpected seat list payload"}
        return data, None

    def book_seat(self, seat_no: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Book a single seat.

        Returns:
            A tuple ``(result, error)``; ``result`` holds ``message`` and
            ``seat_no`` on success.
        """
        return self._request("POST", "/api/book", json_body={"seat_no": seat_no})

    def reset_seats(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Mark every seat available again."""
        return self._request("POST", "/api/reset")
