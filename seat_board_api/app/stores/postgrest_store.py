"""
Seat store backed by a hosted PostgREST endpoint (e.g. Supabase).

The ``seats`` table lives in a managed Postgres database and is reached
over HTTP with ``requests``.  PostgREST turns query-string filters into
a ``WHERE`` clause, so the conditional update in ``book_if_available``
runs as a single ``UPDATE ... WHERE seat_no = $1 AND is_booked = false
RETURNING *`` statement, which Postgres executes atomically per row.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import requests

from seat_board_api.app.core.errors import StoreError
from seat_board_api.app.stores.base import Seat, SeatStore


logger = logging.getLogger(__name__)


def record_to_seat(record: Dict[str, Any]) -> Seat:
    return Seat(seat_no=record["seat_no"], is_booked=bool(record.get("is_booked")))


class PostgrestSeatStore(SeatStore):
    """Seat store talking to ``<base_url>/rest/v1/<table>``."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        table: str = "seats",
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.configured = bool(base_url)
        self.table_url = f"{base_url.rstrip('/')}/rest/v1/{table}"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            }
        )

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        *,
        params: Dict[str, str] | None = None,
        json_body: Any | None = None,
        prefer: str | None = None,
    ) -> Any:
        """Send a request to the table endpoint and return the decoded body.

        Any transport failure or non-2xx response is raised as
        ``StoreError`` carrying PostgREST's error message when present.
        """
        if not self.configured:
            raise StoreError("SUPABASE_URL is not configured")
        headers: Dict[str, str] = {}
        if prefer:
            headers["Prefer"] = prefer
        try:
            logger.debug("Sending %s request to %s params=%s", method, self.table_url, params)
            response = self.session.request(
                method=method,
                url=self.table_url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None
            return response.json()
        except requests.HTTPError as exc:
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Seat store request failed: %s", message)
            raise StoreError(message) from exc
        except requests.JSONDecodeError as exc:
            logger.error("Seat store sent a non-JSON reply: %s", exc)
            raise StoreError("Invalid response from seat store") from exc
        except requests.RequestException as exc:
            logger.error("Seat store unreachable: %s", exc)
            raise StoreError(str(exc)) from exc

    # ------------------------------------------------------------------
    # SeatStore operations
    # ------------------------------------------------------------------
    def list_seats(self) -> List[Seat]:
        data = self._request("GET", params={"select": "*", "order": "seat_no.asc"})
        return [record_to_seat(record) for record in data or []]

    def get_seat(self, seat_no: str) -> Optional[Seat]:
        data = self._request(
            "GET",
            params={"select": "seat_no,is_booked", "seat_no": f"eq.{seat_no}"},
        )
        if not data:
            return None
        return record_to_seat(data[0])

    def book_if_available(self, seat_no: str) -> List[Seat]:
        data = self._request(
            "PATCH",
            params={"seat_no": f"eq.{seat_no}", "is_booked": "eq.false"},
            json_body={"is_booked": True},
            prefer="return=representation",
        )
        return [record_to_seat(record) for record in data or []]

    def reset_all(self) -> int:
        # Hosted PostgREST rejects updates without a filter; seat_no is
        # NOT NULL so this filter matches every row.
        data = self._request(
            "PATCH",
            params={"seat_no": "not.is.null"},
            json_body={"is_booked": False},
            prefer="return=representation",
        )
        return len(data or [])

    def add_seats(self, seat_nos: Iterable[str]) -> int:
        records = [{"seat_no": seat_no, "is_booked": False} for seat_no in seat_nos]
        if not records:
            return 0
        data = self._request(
            "POST",
            params={"on_conflict": "seat_no"},
            json_body=records,
            prefer="resolution=ignore-duplicates,return=representation",
        )
        return len(data or [])
