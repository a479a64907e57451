"""
Seat store interface.

A seat store persists seat records and offers the three primitives the
booking service is built on: read, conditional update and bulk update.
The booking service receives a store instance rather than reaching for
a global connection, so tests can substitute a double that simulates a
lost race.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass
class Seat:
    """A bookable seat identified by ``seat_no`` (e.g. ``"A1"``)."""

    seat_no: str
    is_booked: bool = False

    def __repr__(self):
        return f"<Seat(seat_no='{self.seat_no}', is_booked={self.is_booked})>"


class SeatStore(ABC):
    """Abstract seat store.

    Implementations raise ``StoreError`` for every backend failure.
    """

    def init(self) -> None:
        """Prepare the backing store.  Remote stores need nothing."""

    @abstractmethod
    def list_seats(self) -> List[Seat]:
        """Return every seat ordered by ``seat_no`` (raw string order)."""

    @abstractmethod
    def get_seat(self, seat_no: str) -> Optional[Seat]:
        """Return the seat with ``seat_no`` or ``None`` if it does not exist."""

    @abstractmethod
    def book_if_available(self, seat_no: str) -> List[Seat]:
        """Atomically mark the seat booked if it is still available.

        Returns the rows actually modified: one seat when the update
        won, an empty list when the seat was already booked (or does
        not exist) at the moment of the write.
        """

    @abstractmethod
    def reset_all(self) -> int:
        """Mark every seat available and return the number of rows written."""

    @abstractmethod
    def add_seats(self, seat_nos: Iterable[str]) -> int:
        """Insert the given seats as available, skipping existing ones.

        Returns the number of seats created.  Only the seeding tool
        calls this; the booking service never creates seats.
        """
