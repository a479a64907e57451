"""
HTTP API tests.

Drive the FastAPI application through ``TestClient`` against a
temporary SQLite store.
"""
from fastapi.testclient import TestClient

from seat_board_api.app.main import create_app
from tests.conftest import BrokenStore, RaceLosingStore, seed


class TestEndToEnd:
    """The full list, book, reset cycle"""

    def test_book_conflict_and_reset(self, store):
        seed(store, available=["A1"], booked=["A2"])
        with TestClient(create_app(store=store)) as client:
            response = client.get("/api/seats")
            assert response.status_code == 200
            assert response.json() == [
                {"seat_no": "A1", "is_booked": False},
                {"seat_no": "A2", "is_booked": True},
            ]

            response = client.post("/api/book", json={"seat_no": "A1"})
            assert response.status_code == 200
            assert response.json() == {"message": "Seat A1 booked successfully", "seat_no": "A1"}

            response = client.post("/api/book", json={"seat_no": "A2"})
            assert response.status_code == 409
            assert response.json() == {"error": "Seat already booked"}

            response = client.post("/api/reset")
            assert response.status_code == 200
            assert response.json() == {"message": "All seats reset"}

            seats = client.get("/api/seats").json()
            assert [(s["seat_no"], s["is_booked"]) for s in seats] == [("A1", False), ("A2", False)]


class TestListSeats:
    """GET /api/seats"""

    def test_seats_are_ordered_by_raw_seat_no(self, store):
        seed(store, available=["A2", "A10", "B1", "A1"])
        with TestClient(create_app(store=store)) as client:
            seats = client.get("/api/seats").json()
        assert [s["seat_no"] for s in seats] == ["A1", "A10", "A2", "B1"]

    def test_store_failure_returns_500_with_error(self):
        with TestClient(create_app(store=BrokenStore("store is down"))) as client:
            response = client.get("/api/seats")
        assert response.status_code == 500
        assert response.json() == {"error": "store is down"}


class TestBookSeat:
    """POST /api/book"""

    def test_booking_persists(self, client, seeded_store):
        assert client.post("/api/book", json={"seat_no": "A3"}).status_code == 200
        assert seeded_store.get_seat("A3").is_booked is True

    def test_second_booking_conflicts(self, client):
        client.post("/api/book", json={"seat_no": "A1"})
        response = client.post("/api/book", json={"seat_no": "A1"})
        assert response.status_code == 409
        assert response.json()["error"] == "Seat already booked"

    def test_unknown_seat_returns_404(self, client):
        response = client.post("/api/book", json={"seat_no": "Z99"})
        assert response.status_code == 404
        assert response.json() == {"error": "Seat not found"}

    def test_padded_seat_no_is_not_found(self, client, seeded_store):
        response = client.post("/api/book", json={"seat_no": " A1 "})
        assert response.status_code == 404
        assert response.json() == {"error": "Seat not found"}
        assert seeded_store.get_seat("A1").is_booked is False

    def test_empty_seat_no_returns_400(self, client):
        response = client.post("/api/book", json={"seat_no": ""})
        assert response.status_code == 400
        assert response.json() == {"error": "Seat number is required"}

    def test_missing_seat_no_returns_400(self, client):
        response = client.post("/api/book", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Seat number is required"}

    def test_request_without_body_returns_400(self, client):
        response = client.post("/api/book")
        assert response.status_code == 400
        assert response.json() == {"error": "Seat number is required"}

    def test_malformed_body_returns_400(self, client):
        response = client.post(
            "/api/book",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "error" in response.json()

    def test_lost_race_returns_409_with_distinct_message(self):
        with TestClient(create_app(store=RaceLosingStore(["A1"]))) as client:
            response = client.post("/api/book", json={"seat_no": "A1"})
        assert response.status_code == 409
        assert response.json() == {"error": "Seat already booked by another request"}

    def test_store_failure_returns_500(self):
        with TestClient(create_app(store=BrokenStore())) as client:
            response = client.post("/api/book", json={"seat_no": "A1"})
        assert response.status_code == 500
        assert response.json() == {"error": "connection refused"}


class TestResetSeats:
    """POST /api/reset"""

    def test_reset_twice_succeeds(self, client):
        client.post("/api/book", json={"seat_no": "A1"})
        for _ in range(2):
            response = client.post("/api/reset")
            assert response.status_code == 200
            assert all(not s["is_booked"] for s in client.get("/api/seats").json())

    def test_store_failure_returns_500(self):
        with TestClient(create_app(store=BrokenStore())) as client:
            response = client.post("/api/reset")
        assert response.status_code == 500
        assert response.json() == {"error": "connection refused"}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_cors_headers_present(client):
    response = client.get("/api/seats", headers={"Origin": "http://example.com"})
    assert response.headers.get("access-control-allow-origin") == "*"
