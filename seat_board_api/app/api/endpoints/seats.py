"""
Seat endpoints.

These routes list the board, book a single seat and reset every seat.
They delegate to ``BookingService``; errors raised by the service are
turned into ``{"error": message}`` responses by the handlers installed
in ``main.create_app``.

The handlers are plain functions so FastAPI runs them on its worker
thread pool and concurrent bookings really do race at the store.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request

from seat_board_api.app.schemas.seat import (
    BookingRequest,
    BookingResult,
    ErrorResponse,
    MessageResponse,
    SeatRead,
)
from seat_board_api.app.services.booking_service import BookingService


router = APIRouter()


def get_booking_service(request: Request) -> BookingService:
    """Build a booking service over the store attached to the application."""
    return BookingService(request.app.state.seat_store)


@router.get(
    "/seats",
    response_model=List[SeatRead],
    responses={500: {"model": ErrorResponse}},
)
def list_seats(service: BookingService = Depends(get_booking_service)) -> List[SeatRead]:
    """Return every seat ordered by seat number."""
    return [SeatRead.model_validate(seat) for seat in service.list_seats()]


@router.post(
    "/book",
    response_model=BookingResult,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def book_seat(
    booking: Optional[BookingRequest] = None,
    service: BookingService = Depends(get_booking_service),
) -> BookingResult:
    """Book one seat.

    A request without a body is treated like one without a seat number.
    Responds 409 both when the seat was already booked and when another
    request booked it first; the error text tells the two apart.
    """
    seat_no = booking.seat_no if booking else None
    return BookingResult(**service.book_seat(seat_no))


@router.post(
    "/reset",
    response_model=MessageResponse,
    responses={500: {"model": ErrorResponse}},
)
def reset_seats(service: BookingService = Depends(get_booking_service)) -> MessageResponse:
    """Make every seat available again."""
    return MessageResponse(**service.reset_seats())
