"""
API client tests.

A fake ``requests`` session returns canned responses so the client's
``(data, error)`` contract can be checked without a server.
"""
import json

import pytest
import requests

from seat_board_client import SeatBoardAPI


def make_response(status_code, body=None, url="http://board.test"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
    return response


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.requests = []

    def request(self, **kwargs):
        self.requests.append(kwargs)
        if self.exc:
            raise self.exc
        return self.response


def api_with(session):
    return SeatBoardAPI(base_url="http://board.test/", session=session)


def test_list_seats_success():
    seats = [{"seat_no": "A1", "is_booked": False}]
    session = FakeSession(make_response(200, seats))

    data, error = api_with(session).list_seats()

    assert (data, error) == (seats, None)
    assert session.requests[0]["method"] == "GET"
    assert session.requests[0]["url"] == "http://board.test/api/seats"


def test_book_seat_sends_seat_no():
    session = FakeSession(make_response(200, {"message": "Seat A1 booked successfully", "seat_no": "A1"}))

    data, error = api_with(session).book_seat("A1")

    assert error is None
    assert data["seat_no"] == "A1"
    assert session.requests[0]["method"] == "POST"
    assert session.requests[0]["url"] == "http://board.test/api/book"
    assert session.requests[0]["json"] == {"seat_no": "A1"}


@pytest.mark.parametrize("status,message", [
    (409, "Seat already booked"),
    (404, "Seat not found"),
    (500, "store is down"),
])
def test_server_error_text_is_returned(status, message):
    session = FakeSession(make_response(status, {"error": message}))

    data, error = api_with(session).book_seat("A1")

    assert data is None
    assert error == {"status_code": status, "message": message}


def test_error_without_json_body_uses_response_text():
    session = FakeSession(make_response(502, "<html>Bad gateway</html>"))

    _, error = api_with(session).reset_seats()

    assert error["status_code"] == 502
    assert error["message"] == "<html>Bad gateway</html>"


def test_transport_failure_has_no_status():
    session = FakeSession(exc=requests.ConnectionError("Connection refused"))

    seats, error = api_with(session).list_seats()

    assert seats == []
    assert error["status_code"] is None
    assert "Connection refused" in error["message"]


def test_unexpected_list_payload_is_an_error():
    session = FakeSession(make_response(200, {"error": "nope"}))

    seats, error = api_with(session).list_seats()

    assert seats == []
    assert error["status_code"] is None


def test_reset_posts_to_reset_endpoint():
    session = FakeSession(make_response(200, {"message": "All seats reset"}))

    data, error = api_with(session).reset_seats()

    assert (data, error) == ({"message": "All seats reset"}, None)
    assert session.requests[0]["url"] == "http://board.test/api/reset"
