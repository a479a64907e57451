"""
Top-level package for the Seat Reservation Board API.

All functionality lives in submodules under ``app``; the client side
lives in the ``seat_board_client`` and ``seat_board_console`` modules
at the repository root.
"""

__all__ = []
