"""
SQLite-backed seat store.

Each operation opens its own connection, so one store instance can be
shared by every request thread.  SQLite serialises writers on the
database lock, which makes the single-statement conditional update in
``book_if_available`` atomic with respect to other bookings.
"""

import logging
import sqlite3
from typing import Iterable, List, Optional

from seat_board_api.app.core.db import get_cursor, init_db
from seat_board_api.app.core.errors import StoreError
from seat_board_api.app.stores.base import Seat, SeatStore


logger = logging.getLogger(__name__)


def row_to_seat(row: sqlite3.Row) -> Seat:
    return Seat(seat_no=row["seat_no"], is_booked=bool(row["is_booked"]))


class SqliteSeatStore(SeatStore):
    """Seat store persisting to a local SQLite file."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def init(self) -> None:
        try:
            version = init_db(self.db_path)
        except sqlite3.Error as e:
            logger.exception("Failed to initialise seat database %s", self.db_path)
            raise StoreError(str(e)) from e
        logger.info("Seat database %s at schema version %s", self.db_path, version)

    def list_seats(self) -> List[Seat]:
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute(
                    "SELECT seat_no, is_booked FROM seats ORDER BY seat_no ASC"
                ).fetchall()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        return [row_to_seat(row) for row in rows]

    def get_seat(self, seat_no: str) -> Optional[Seat]:
        try:
            with get_cursor(self.db_path) as cursor:
                row = cursor.execute(
                    "SELECT seat_no, is_booked FROM seats WHERE seat_no = ?",
                    (seat_no,),
                ).fetchone()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        return row_to_seat(row) if row else None

    def book_if_available(self, seat_no: str) -> List[Seat]:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    """
                    UPDATE seats SET is_booked = 1, updated_at = CURRENT_TIMESTAMP
                    WHERE seat_no = ? AND is_booked = 0
                    """,
                    (seat_no,),
                )
                modified = cursor.rowcount
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        if modified == 0:
            return []
        return [Seat(seat_no=seat_no, is_booked=True)]

    def reset_all(self) -> int:
        try:
            with get_cursor(self.db_path) as cursor:
                cursor.execute(
                    "UPDATE seats SET is_booked = 0, updated_at = CURRENT_TIMESTAMP"
                )
                return cursor.rowcount
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def add_seats(self, seat_nos: Iterable[str]) -> int:
        created = 0
        try:
            with get_cursor(self.db_path) as cursor:
                for seat_no in seat_nos:
                    cursor.execute(
                        "INSERT OR IGNORE INTO seats (seat_no, is_booked) VALUES (?, 0)",
                        (seat_no,),
                    )
                    created += cursor.rowcount
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        return created
