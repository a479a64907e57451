"""
Seat store backends.

``create_store`` picks the backend named by ``settings.seat_store``.
"""

from seat_board_api.app.core.config import Settings, settings as default_settings
from seat_board_api.app.core.db import get_database_path
from seat_board_api.app.core.errors import StoreError
from seat_board_api.app.stores.base import Seat, SeatStore
from seat_board_api.app.stores.postgrest_store import PostgrestSeatStore
from seat_board_api.app.stores.sqlite_store import SqliteSeatStore

__all__ = [
    "Seat",
    "SeatStore",
    "SqliteSeatStore",
    "PostgrestSeatStore",
    "create_store",
]


def create_store(settings: Settings = default_settings) -> SeatStore:
    """Build the seat store configured in ``settings``."""
    if settings.seat_store == "sqlite":
        return SqliteSeatStore(get_database_path(settings.database_url))
    if settings.seat_store == "postgrest":
        return PostgrestSeatStore(
            base_url=settings.supabase_url,
            api_key=settings.supabase_key,
            timeout=settings.seat_store_timeout,
        )
    raise StoreError(f"Unknown seat store backend: {settings.seat_store}")
