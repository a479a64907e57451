"""Pytest configuration and fixtures."""
from typing import Iterable, List, Optional

import pytest
from fastapi.testclient import TestClient

from seat_board_api.app.core.errors import StoreError
from seat_board_api.app.main import create_app
from seat_board_api.app.stores.base import Seat, SeatStore
from seat_board_api.app.stores.sqlite_store import SqliteSeatStore


def seed(store: SeatStore, available: Iterable[str] = (), booked: Iterable[str] = ()) -> None:
    """Create seats directly in the store, booking the ``booked`` ones."""
    booked = list(booked)
    store.add_seats(list(available) + booked)
    for seat_no in booked:
        store.book_if_available(seat_no)


class RaceLosingStore(SeatStore):
    """Store double whose pre-check always sees the seat available but
    whose conditional update always reports zero modified rows, as if a
    concurrent request booked the seat in between."""

    def __init__(self, seat_nos: Iterable[str]) -> None:
        self.seats = {seat_no: Seat(seat_no=seat_no) for seat_no in seat_nos}
        self.update_calls: List[str] = []

    def list_seats(self) -> List[Seat]:
        return sorted(self.seats.values(), key=lambda seat: seat.seat_no)

    def get_seat(self, seat_no: str) -> Optional[Seat]:
        return self.seats.get(seat_no)

    def book_if_available(self, seat_no: str) -> List[Seat]:
        self.update_calls.append(seat_no)
        return []

    def reset_all(self) -> int:
        return len(self.seats)

    def add_seats(self, seat_nos: Iterable[str]) -> int:
        return 0


class BrokenStore(SeatStore):
    """Store double that fails every operation like an unreachable database."""

    def __init__(self, message: str = "connection refused") -> None:
        self.message = message

    def list_seats(self) -> List[Seat]:
        raise StoreError(self.message)

    def get_seat(self, seat_no: str) -> Optional[Seat]:
        raise StoreError(self.message)

    def book_if_available(self, seat_no: str) -> List[Seat]:
        raise StoreError(self.message)

    def reset_all(self) -> int:
        raise StoreError(self.message)

    def add_seats(self, seat_nos: Iterable[str]) -> int:
        raise StoreError(self.message)


@pytest.fixture(scope='function')
def store(tmp_path):
    """A migrated SQLite seat store in a temporary directory."""
    seat_store = SqliteSeatStore(str(tmp_path / "seats.db"))
    seat_store.init()
    return seat_store


@pytest.fixture(scope='function')
def seeded_store(store):
    """Store with A1..A3 available and B1 booked."""
    seed(store, available=["A1", "A2", "A3"], booked=["B1"])
    return store


@pytest.fixture(scope='function')
def client(seeded_store):
    """Test client for an app serving ``seeded_store``."""
    app = create_app(store=seeded_store)
    with TestClient(app) as test_client:
        yield test_client
