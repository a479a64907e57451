"""
Business logic for seat bookings.

The ``BookingService`` lists seats, books a single seat and resets the
whole board.  Booking is a check followed by a conditional write: the
pre-check gives the common "already booked" case a fast, friendly
answer, while the store's update-if-still-available is what actually
prevents two requests from booking the same seat.  A conditional
update that modifies no row means another request won the race.

The service keeps no state besides the injected store, so any number
of request threads or server processes may share one backing store.
"""

import logging
from typing import Dict, List, Optional

from seat_board_api.app.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from seat_board_api.app.stores.base import Seat, SeatStore


logger = logging.getLogger(__name__)


class BookingService:
    """Service for listing, booking and resetting seats."""

    def __init__(self, store: SeatStore) -> None:
        self.store = store

    def list_seats(self) -> List[Seat]:
        """Return every seat ordered by ``seat_no``.

        Raises ``StoreError`` if the store cannot be read; no partial
        list is ever returned.
        """
        return self.store.list_seats()

    def book_seat(self, seat_no: Optional[str]) -> Dict[str, str]:
        """Book ``seat_no`` for the caller.

        Raises ``ValidationError`` for a missing seat number,
        ``NotFoundError`` for an unknown seat and ``ConflictError`` if
        the seat is already booked or another request booked it between
        the check and the write.
        """
        if not seat_no or not seat_no.strip():
            raise ValidationError("Seat number is required")

        seat = self.store.get_seat(seat_no)
        if seat is None:
            raise NotFoundError("Seat not found")
        if seat.is_booked:
            logger.info("Rejected booking of %s: seat already booked", seat_no)
            raise ConflictError("Seat already booked", reason=ConflictError.ALREADY_BOOKED)

        updated = self.store.book_if_available(seat_no)
        if not updated:
            logger.warning("Booking of %s lost the race to a concurrent request", seat_no)
            raise ConflictError(
                "Seat already booked by another request",
                reason=ConflictError.RACE_LOST,
            )

        logger.info("Seat %s booked", seat_no)
        return {"message": f"Seat {seat_no} booked successfully", "seat_no": seat_no}

    def reset_seats(self) -> Dict[str, str]:
        """Mark every seat available.  Idempotent."""
        count = self.store.reset_all()
        logger.info("Reset %d seats", count)
        return {"message": "All seats reset"}
