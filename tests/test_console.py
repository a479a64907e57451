"""
Console client tests.
"""
import io

from seat_board_console import SeatBoardConsole, render_bar, render_board, render_seat
from seat_board_view import BoardStats, Notifier, SeatBoard, SeatView
from tests.test_seat_board_view import FakeAPI, FakeClock


def make_console(seats, answers=()):
    api = FakeAPI(seats)
    board = SeatBoard(api=api, notifier=Notifier(clock=FakeClock()))
    board.refresh()
    replies = iter(answers)
    out = io.StringIO()
    console = SeatBoardConsole(board, read_line=lambda prompt: next(replies), out=out)
    return console, api, out


def test_render_seat_states():
    assert render_seat(SeatView("A1", booked=False), 3) == "[A1  ]"
    assert render_seat(SeatView("A10", booked=True), 3) == "[A10x]"
    assert render_seat(SeatView("A1", booked=True, pending=True), 3) == "[... ]"


def test_render_bar_fills_booked_share():
    stats = BoardStats(total=4, booked=1, available=3, booked_percent=25, available_percent=75)
    assert render_bar(stats, width=20) == "|#####---------------| 3 Available"


def test_render_board_rows_and_stats():
    console, _, _ = make_console({"A10": False, "A2": True, "A1": False, "B1": False})

    text = render_board(console.board)

    lines = text.splitlines()
    assert lines[0] == "A  [A1  ] [A2 x] [A10 ]"
    assert lines[1] == "B  [B1  ]"
    assert "Total: 4   Available: 3 (75%)   Booked: 1 (25%)" in text


def test_render_board_shows_inline_load_error():
    console, api, _ = make_console({"A1": False})
    api.list_error = {"status_code": None, "message": "down"}
    console.board.refresh()

    text = render_board(console.board)

    assert "Error loading seats" in text
    assert "[A1" not in text


def test_book_command_books_and_draws():
    console, api, out = make_console({"A1": False})

    assert console.handle("book a1") is True

    assert ("book", "A1") in api.calls
    assert "Booked A1 successfully!" in out.getvalue()
    assert "[A1x]" in out.getvalue()


def test_book_command_on_booked_seat_sends_nothing():
    console, api, out = make_console({"A1": True})
    api.calls.clear()

    console.handle("book A1")

    assert api.calls == []
    assert "already booked" in out.getvalue()


def test_reset_requires_confirmation():
    console, api, _ = make_console({"A1": True}, answers=["n", "y"])

    console.handle("reset")
    assert "reset" not in api.calls

    console.handle("reset")
    assert "reset" in api.calls
    assert api.seats == {"A1": False}


def test_quit_and_unknown_commands():
    console, _, out = make_console({"A1": False})
    assert console.handle("dance") is True
    assert "Unknown command" in out.getvalue()
    assert console.handle("quit") is False


def test_run_stops_at_end_of_input():
    api = FakeAPI({"A1": False})
    board = SeatBoard(api=api, notifier=Notifier(clock=FakeClock()))
    lines = iter(["book A1"])

    def read_line(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    SeatBoardConsole(board, read_line=read_line, out=io.StringIO()).run()

    assert api.seats["A1"] is True
