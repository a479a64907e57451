"""
Error taxonomy for the seat board.

Every failure the service reports to a caller is one of the classes
below.  Each carries the HTTP status it maps to; the handlers
registered in ``main.create_app`` turn them into ``{"error": message}``
responses.
"""

from fastapi import status


class SeatBoardError(Exception):
    """Base class for errors reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SeatBoardError):
    """Required input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(SeatBoardError):
    """The requested seat does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(SeatBoardError):
    """The seat cannot be booked in its current state.

    ``reason`` is ``"already_booked"`` when the pre-check saw the seat
    booked, and ``"race_lost"`` when the conditional update modified no
    row because another request booked the seat first.
    """

    status_code = status.HTTP_409_CONFLICT

    ALREADY_BOOKED = "already_booked"
    RACE_LOST = "race_lost"

    def __init__(self, message: str, reason: str = ALREADY_BOOKED) -> None:
        super().__init__(message)
        self.reason = reason


class StoreError(SeatBoardError):
    """The seat store is unreachable or rejected the query."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
