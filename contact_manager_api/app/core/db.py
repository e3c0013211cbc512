"""
SQLite database integration and simple migration system.

This module provides the ``Database`` handle used by the service
layer, a helper for resolving the database path from the settings and
``init_db`` which applies migrations on application start.  The
handle is created once by the application factory and passed to the
services explicitly; every operation opens its own short-lived
connection from it.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

logger = logging.getLogger(__name__)

# Millisecond ISO-8601 timestamps so that ordering by creation time and
# ``updated_at`` changes are observable within the same second.
TIMESTAMP_SQL = "(strftime('%Y-%m-%dT%H:%M:%fZ', 'now'))"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: contacts table
    (
        1,
        f"""
        CREATE TABLE IF NOT EXISTS contacts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            email TEXT NOT NULL,
            name TEXT NOT NULL,
            phone TEXT,
            company TEXT,
            created_at TIMESTAMP NOT NULL DEFAULT {TIMESTAMP_SQL},
            updated_at TIMESTAMP NOT NULL DEFAULT {TIMESTAMP_SQL}
        );

        -- Email uniqueness is a store constraint, never a pre-check query.
        CREATE UNIQUE INDEX IF NOT EXISTS idx_contacts_email ON contacts(email);
        """,
    ),
    # Migration 2: index backing the default listing order
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_contacts_created_at ON contacts(created_at);
        """,
    ),
]


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the url (``settings.database_url`` by default) is an absolute
    path, use it directly.  Otherwise resolve it relative to the
    project root.
    """
    db_url = db_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


class Database:
    """Handle to the durable contact store.

    Holds only the location of the store; connections are opened per
    operation and closed by the caller.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = get_database_path(path)

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` objects so columns can be
        accessed by name.  Timestamps are stored and returned as ISO
        strings; no type detection is enabled.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Context manager that yields a cursor and closes the connection on exit."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    def __repr__(self) -> str:
        return f"Database(path={self.path!r})"


def init_db(database: Database) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with database.get_cursor() as cursor:
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
                logger.info("Applied migration %s to %s", version, database.path)
