"""Board model for seat board clients.

This module holds everything a seat board front end needs apart from
drawing: natural ordering and row grouping of seats, occupancy
statistics, a single-slot notification area and the ``SeatBoard``
state machine that performs optimistic bookings against the API.

The server stays authoritative.  An activated seat is shown booked and
pending while its request is in flight, and the board refreshes from
the server after every booking or reset, whatever the outcome.
Statistics are computed only from the last server snapshot, never from
optimistic state.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from seat_board_client import SeatBoardAPI


logger = logging.getLogger(__name__)

NOTIFICATION_SECONDS = 3.0

LOAD_ERROR_TEXT = "Error loading seats"


# ----------------------------------------------------------------------
# Ordering and grouping
# ----------------------------------------------------------------------
def seat_sort_key(seat_no: str) -> Tuple[str, int, int, str]:
    """Sort key ordering seats by row letter, then numeric column.

    ``"A2"`` sorts before ``"A10"``.  A seat whose suffix is not a
    number sorts after the numbered seats of its row.
    """
    row, suffix = seat_no[:1], seat_no[1:]
    if suffix.isdecimal():
        return row, 0, int(suffix), ""
    return row, 1, 0, suffix


def sort_seats(seats: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(seats, key=lambda seat: seat_sort_key(seat["seat_no"]))


def group_rows(seats: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Group seats by their leading row letter.

    Rows come out in row-letter order and seats within a row in
    numeric column order.
    """
    rows: Dict[str, List[Dict[str, Any]]] = {}
    for seat in sort_seats(seats):
        rows.setdefault(seat["seat_no"][:1], []).append(seat)
    return rows


# ----------------------------------------------------------------------
# Statistics
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class BoardStats:
    """Occupancy figures for one snapshot of the board."""

    total: int
    booked: int
    available: int
    booked_percent: int
    available_percent: int


def booked_percentage(booked: int, total: int) -> int:
    """Return ``round(100 * booked / total)`` with halves rounded up, 0 if empty."""
    if total == 0:
        return 0
    # Integer form of floor(100 * booked / total + 0.5).
    return (200 * booked + total) // (2 * total)


def compute_stats(seats: List[Dict[str, Any]]) -> BoardStats:
    """Compute occupancy for a snapshot.

    The available percentage is derived as ``100 - booked_percent`` so
    the two always add up to exactly 100.
    """
    total = len(seats)
    booked = sum(1 for seat in seats if seat.get("is_booked"))
    booked_percent = booked_percentage(booked, total)
    return BoardStats(
        total=total,
        booked=booked,
        available=total - booked,
        booked_percent=booked_percent,
        available_percent=100 - booked_percent,
    )


# ----------------------------------------------------------------------
# Notifications
# ----------------------------------------------------------------------
@dataclass
class Notification:
    text: str
    kind: str
    shown_at: float


class Notifier:
    """Single-slot notification area.

    Showing a message replaces whatever is visible.  Each message
    disappears ``duration`` seconds after it was shown.
    """

    def __init__(
        self,
        duration: float = NOTIFICATION_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration = duration
        self.clock = clock
        self._current: Optional[Notification] = None

    def show(self, text: str, kind: str = "info") -> Notification:
        self._current = Notification(text=text, kind=kind, shown_at=self.clock())
        return self._current

    def current(self) -> Optional[Notification]:
        """Return the visible notification, dismissing it once expired."""
        if self._current and self.clock() - self._current.shown_at >= self.duration:
            self._current = None
        return self._current


# ----------------------------------------------------------------------
# Board state
# ----------------------------------------------------------------------
@dataclass
class SeatView:
    """How one seat should be drawn."""

    seat_no: str
    booked: bool
    pending: bool = False

    @property
    def interactive(self) -> bool:
        return not self.booked


@dataclass
class SeatBoard:
    """Client-side state of the seat board.

    ``on_change`` is called whenever the visible state changes, in
    particular right after an optimistic update and before the booking
    request is sent, so a renderer can redraw immediately.
    """

    api: SeatBoardAPI
    notifier: Notifier = field(default_factory=Notifier)
    on_change: Optional[Callable[["SeatBoard"], None]] = None

    snapshot: List[Dict[str, Any]] = field(default_factory=list)
    load_error: Optional[str] = None
    optimistic: set = field(default_factory=set)
    pending: set = field(default_factory=set)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def _changed(self) -> None:
        if self.on_change:
            self.on_change(self)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def refresh(self) -> bool:
        """Replace the snapshot with the server's seat list.

        On failure the previous snapshot is kept for the statistics and
        ``load_error`` is set so the grid shows an inline error.
        """
        seats, error = self.api.list_seats()
        with self._lock:
            if error:
                logger.error("Failed to load seats: %s", error.get("message"))
                self.load_error = LOAD_ERROR_TEXT
            else:
                self.snapshot = seats
                self.load_error = None
                # The server snapshot supersedes optimistic marks for
                # seats whose requests have completed.
                self.optimistic &= self.pending
        self._changed()
        return error is None

    def stats(self) -> BoardStats:
        with self._lock:
            return compute_stats(self.snapshot)

    def rows(self) -> Dict[str, List[SeatView]]:
        """Grouped seats with optimistic marks applied."""
        with self._lock:
            grouped = group_rows(self.snapshot)
            return {
                row: [
                    SeatView(
                        seat_no=seat["seat_no"],
                        booked=bool(seat.get("is_booked")) or seat["seat_no"] in self.optimistic,
                        pending=seat["seat_no"] in self.pending,
                    )
                    for seat in seats
                ]
                for row, seats in grouped.items()
            }

    def seat_view(self, seat_no: str) -> Optional[SeatView]:
        for seats in self.rows().values():
            for view in seats:
                if view.seat_no == seat_no:
                    return view
        return None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def activate(self, seat_no: str) -> bool:
        """Book ``seat_no`` optimistically.

        Returns ``False`` without contacting the server when the seat is
        unknown, already booked or has a request in flight.  Otherwise
        returns whether the server confirmed the booking.
        """
        with self._lock:
            known = {seat["seat_no"]: seat for seat in self.snapshot}
            seat = known.get(seat_no)
            if seat is None or seat.get("is_booked") or seat_no in self.optimistic:
                return False
            self.optimistic.add(seat_no)
            self.pending.add(seat_no)
        self._changed()

        result, error = self.api.book_seat(seat_no)

        with self._lock:
            self.pending.discard(seat_no)
            if error:
                self.optimistic.discard(seat_no)
        if error:
            if error.get("status_code") is None:
                self.notifier.show("Network error", "error")
            else:
                self.notifier.show(error.get("message") or "Booking failed", "error")
        else:
            self.notifier.show(f"Booked {seat_no} successfully!", "success")
        self._changed()
        self.refresh()
        return error is None

    def reset(self, confirm: Callable[[], bool]) -> bool:
        """Reset every seat after ``confirm()`` approves."""
        if not confirm():
            return False
        _, error = self.api.reset_seats()
        if error:
            self.notifier.show("Failed to reset seats", "error")
            self._changed()
            return False
        self.notifier.show("All seats reset!", "success")
        self.refresh()
        return True
