"""
Pydantic models for seats and booking requests.

``BookingRequest.seat_no`` is optional on purpose: a missing or blank
value is reported by the booking service as a 400 with the usual
``{"error": ...}`` body instead of FastAPI's generic validation output.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SeatRead(BaseModel):
    seat_no: str = Field(..., examples=["A1"])
    is_booked: bool = False

    model_config = {
        "from_attributes": True,
    }


class BookingRequest(BaseModel):
    """Schema for booking a seat."""

    seat_no: Optional[str] = Field(default=None, examples=["A1"])


class BookingResult(BaseModel):
    message: str
    seat_no: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
