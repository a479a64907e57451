"""Console client for the seat board.

Draws the board as text and reads simple commands from standard input.
It talks to the API through :class:`seat_board_client.SeatBoardAPI`
and keeps its state in :class:`seat_board_view.SeatBoard`:

* ``book <seat>`` – book a seat, e.g. ``book A1``.
* ``reset`` – make every seat available (asks for confirmation).
* ``refresh`` – reload the board from the server.
* ``help`` – show the command list.
* ``quit`` – leave.

The server address comes from ``--base-url`` or the
``SEAT_BOARD_BASE_URL`` environment variable.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Callable, List, Optional, TextIO

from seat_board_client import SeatBoardAPI
from seat_board_view import BoardStats, SeatBoard, SeatView


logger = logging.getLogger(__name__)

BAR_WIDTH = 40

HELP_TEXT = (
    "Commands:\n"
    "  book <seat>  Book a seat, e.g. 'book A1'\n"
    "  reset        Make every seat available\n"
    "  refresh      Reload the board\n"
    "  help         Show this message\n"
    "  quit         Exit"
)


def render_seat(view: SeatView, width: int) -> str:
    """Available seats as ``[A1 ]``, booked as ``[A1x]``, pending as ``[...]``."""
    if view.pending:
        return "[" + "...".ljust(width + 1) + "]"
    marker = "x" if view.booked else " "
    return f"[{view.seat_no.ljust(width)}{marker}]"


def render_bar(stats: BoardStats, width: int = BAR_WIDTH) -> str:
    """Occupancy bar whose filled share equals the booked percentage."""
    filled = stats.booked_percent * width // 100
    return f"|{'#' * filled}{'-' * (width - filled)}| {stats.available} Available"


def render_stats(stats: BoardStats) -> str:
    return (
        f"Total: {stats.total}   "
        f"Available: {stats.available} ({stats.available_percent}%)   "
        f"Booked: {stats.booked} ({stats.booked_percent}%)"
    )


def render_board(board: SeatBoard) -> str:
    """Render the whole board: notification, grid and statistics."""
    lines: List[str] = []
    notification = board.notifier.current()
    if notification:
        prefix = "!!" if notification.kind == "error" else "**"
        lines.append(f"{prefix} {notification.text}")

    if board.load_error:
        lines.append(board.load_error)
    else:
        rows = board.rows()
        width = max((len(view.seat_no) for seats in rows.values() for view in seats), default=2)
        for row_label, seats in rows.items():
            lines.append(f"{row_label}  " + " ".join(render_seat(view, width) for view in seats))

    stats = board.stats()
    lines.append("")
    lines.append(render_stats(stats))
    lines.append(render_bar(stats))
    return "\n".join(lines)


class SeatBoardConsole:
    """Interactive read-eval-draw loop around a :class:`SeatBoard`."""

    def __init__(
        self,
        board: SeatBoard,
        *,
        read_line: Callable[[str], str] = input,
        out: TextIO = sys.stdout,
    ) -> None:
        self.board = board
        self.read_line = read_line
        self.out = out

    def _print(self, text: str) -> None:
        print(text, file=self.out)

    def draw(self) -> None:
        self._print(render_board(self.board))

    def confirm_reset(self) -> bool:
        answer = self.read_line("Are you sure you want to reset all seats? [y/N] ")
        return answer.strip().lower() in {"y", "yes"}

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------
    def _handle_book(self, args: List[str]) -> None:
        if not args:
            self._print("Usage: book <seat>")
            return
        seat_no = args[0].upper()
        view = self.board.seat_view(seat_no)
        if view is None:
            self._print(f"No seat {seat_no} on the board")
            return
        if not view.interactive:
            self._print(f"Seat {seat_no} is already booked")
            return
        self.board.activate(seat_no)

    def _handle_reset(self) -> None:
        self.board.reset(self.confirm_reset)

    def handle(self, line: str) -> bool:
        """Run one command line.  Returns ``False`` when the user quits."""
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]
        if command in {"quit", "exit", "q"}:
            return False
        if command == "book":
            self._handle_book(args)
        elif command == "reset":
            self._handle_reset()
        elif command == "refresh":
            self.board.refresh()
        elif command == "help":
            self._print(HELP_TEXT)
            return True
        else:
            self._print(f"Unknown command: {command}. Type 'help' for a list.")
            return True
        self.draw()
        return True

    def run(self) -> None:
        self.board.refresh()
        self.draw()
        while True:
            try:
                line = self.read_line("> ")
            except EOFError:
                break
            if not self.handle(line):
                break


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Seat reservation board console client.")
    parser.add_argument(
        "--base-url",
        default=os.getenv("SEAT_BOARD_BASE_URL", "http://localhost:3000"),
        help="Base URL of the seat board API",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(asctime)s [%(levelname)s] %(message)s")
    board = SeatBoard(api=SeatBoardAPI(base_url=args.base_url))
    console = SeatBoardConsole(board)
    # Redraw while a booking is in flight so the pending seat shows.
    board.on_change = lambda changed: console.draw() if changed.pending else None
    try:
        console.run()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
