"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations (``init_db``).  It uses
SQLite as a lightweight embedded database; the hosted PostgREST
backend in ``stores.postgrest_store`` does not go through this module.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

# Seconds a connection waits for a competing writer to release the
# database lock before giving up with "database is locked".
BUSY_TIMEOUT = 30.0

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS seats (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            seat_no TEXT NOT NULL UNIQUE,
            is_booked INTEGER NOT NULL DEFAULT 0
        );
        """,
    ),
    # Migration 2: track when a seat last changed state
    (
        2,
        """
        ALTER TABLE seats ADD COLUMN updated_at TIMESTAMP;
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are returned unchanged; anything else is resolved
    relative to the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name and
    waits up to ``BUSY_TIMEOUT`` seconds for concurrent writers.
    """
    conn = sqlite3.connect(db_path, timeout=BUSY_TIMEOUT)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block exits normally and
    rolled back when it raises.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: str) -> int:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries of
    ``MIGRATIONS``.  Returns the schema version after migrating.
    """
    with get_cursor(db_path) as cursor:
        # WAL lets readers proceed while a booking holds the write lock.
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
        return current_version
