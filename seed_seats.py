#!/usr/bin/env python3
"""
Seed the seat board with a rectangular grid of available seats.

The booking service never creates seats, so a fresh store has to be
seeded once.  Seats that already exist are left untouched, which makes
the script safe to run repeatedly.  The store is the one configured
through the environment (``SEAT_STORE``, ``DATABASE_URL``,
``SUPABASE_URL``/``SUPABASE_KEY``).

Usage:
    python seed_seats.py --rows A-E --cols 10
"""

import argparse
import string
import sys
from typing import List

from seat_board_api.app.core.errors import StoreError
from seat_board_api.app.stores import create_store


def parse_rows(rows_arg: str) -> List[str]:
    """Expand ``"A-E"`` to ``["A", "B", "C", "D", "E"]``; ``"ACF"`` lists rows directly."""
    rows_arg = rows_arg.strip().upper()
    if len(rows_arg) == 3 and rows_arg[1] == "-":
        start, end = rows_arg[0], rows_arg[2]
        if start not in string.ascii_uppercase or end not in string.ascii_uppercase or start > end:
            raise ValueError(f"Invalid row range: {rows_arg}")
        return list(string.ascii_uppercase[string.ascii_uppercase.index(start):string.ascii_uppercase.index(end) + 1])
    if not rows_arg or any(ch not in string.ascii_uppercase for ch in rows_arg):
        raise ValueError(f"Invalid rows: {rows_arg}")
    return list(dict.fromkeys(rows_arg))


def seat_numbers(rows: List[str], cols: int) -> List[str]:
    return [f"{row}{col}" for row in rows for col in range(1, cols + 1)]


def main():
    ap = argparse.ArgumentParser(description="Seed seat board seats.")
    ap.add_argument("--rows", default="A-E", help="Row letters, as a range (A-E) or a list (ABC)")
    ap.add_argument("--cols", type=int, default=10, help="Seats per row")
    args = ap.parse_args()

    try:
        rows = parse_rows(args.rows)
    except ValueError as e:
        print(f"[!] {e}", file=sys.stderr)
        sys.exit(1)
    if args.cols < 1:
        print("[!] --cols must be at least 1", file=sys.stderr)
        sys.exit(1)

    store = create_store()
    try:
        store.init()
        created = store.add_seats(seat_numbers(rows, args.cols))
    except StoreError as e:
        print(f"[!] Seeding failed: {e}", file=sys.stderr)
        sys.exit(2)
    print(f"[+] Created {created} seats ({len(rows)} rows x {args.cols} columns)")


if __name__ == "__main__":
    main()
