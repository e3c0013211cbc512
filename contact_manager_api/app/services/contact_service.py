"""
Service layer for contacts.

``ContactService`` provides single-record CRUD operations and a count
over the ``contacts`` table.  It keeps no state between calls: the
``Database`` handle is injected at construction and every operation
opens and closes its own connection.

Driver errors are translated at this boundary: a violated UNIQUE
constraint becomes ``ConflictError`` and any other ``sqlite3.Error``
becomes ``PersistenceError``.  The original driver message is logged
but never exposed.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from contact_manager_api.app.core.db import TIMESTAMP_SQL, Database
from contact_manager_api.app.core.errors import (
    ConflictError,
    NotFoundError,
    PersistenceError,
)
from contact_manager_api.app.schemas.contact import ContactCreate, ContactRead, ContactUpdate

logger = logging.getLogger(__name__)


class ContactService:
    """Service class for managing contacts."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = self.database.get_connection()
        except sqlite3.Error as exc:
            logger.error("Cannot open contact store %s: %s", self.database.path, exc)
            raise PersistenceError() from exc
        try:
            yield conn
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            logger.warning("Integrity error in contact store: %s", exc)
            raise ConflictError() from exc
        except sqlite3.Error as exc:
            conn.rollback()
            logger.error("Contact store error: %s", exc)
            raise PersistenceError() from exc
        finally:
            conn.close()

    async def create(self, data: ContactCreate) -> ContactRead:
        """Insert a new contact and return the created record."""
        with self._connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO contacts (email, name, phone, company) VALUES (?, ?, ?, ?)",
                (data.email, data.name, data.phone, data.company),
            )
            contact_id = cursor.lastrowid
            conn.commit()
            logger.info("Created contact %s", contact_id)
            row = cursor.execute("SELECT * FROM contacts WHERE id = ?", (contact_id,)).fetchone()
            return self._row_to_contact_read(row)

    async def find_all(self) -> List[ContactRead]:
        """Return all contacts, most recently created first."""
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT * FROM contacts ORDER BY created_at DESC, id DESC"
            ).fetchall()
            return [self._row_to_contact_read(row) for row in rows]

    async def find_by_id(self, contact_id: int) -> Optional[ContactRead]:
        """Retrieve a single contact by its ID, or ``None`` if absent."""
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM contacts WHERE id = ?", (contact_id,)).fetchone()
            if not row:
                return None
            return self._row_to_contact_read(row)

    async def update(self, contact_id: int, data: ContactUpdate) -> ContactRead:
        """Update an existing contact.

        Only fields set on ``data`` are written; ``updated_at`` is
        bumped by the store.  An update without fields returns the
        current record untouched.  Raises ``NotFoundError`` for an
        unknown id and ``ConflictError`` on a duplicate email.
        """
        changes = data.model_dump(exclude_unset=True)
        with self._connection() as conn:
            cursor = conn.cursor()
            if changes:
                # Column names come from the schema, never from input keys.
                assignments = ", ".join(f"{column} = ?" for column in changes)
                cursor.execute(
                    f"UPDATE contacts SET {assignments}, updated_at = {TIMESTAMP_SQL} WHERE id = ?",
                    (*changes.values(), contact_id),
                )
                if cursor.rowcount == 0:
                    raise NotFoundError(contact_id)
                conn.commit()
                logger.info("Updated contact %s (%s)", contact_id, ", ".join(changes))
            row = cursor.execute("SELECT * FROM contacts WHERE id = ?", (contact_id,)).fetchone()
            if not row:
                raise NotFoundError(contact_id)
            return self._row_to_contact_read(row)

    async def delete(self, contact_id: int) -> None:
        """Delete a contact by ID.  Raises ``NotFoundError`` if absent."""
        with self._connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM contacts WHERE id = ?", (contact_id,))
            if cursor.rowcount == 0:
                raise NotFoundError(contact_id)
            conn.commit()
            logger.info("Deleted contact %s", contact_id)

    async def count(self) -> int:
        """Return the total number of stored contacts."""
        with self._connection() as conn:
            row = conn.execute("SELECT COUNT(*) AS count FROM contacts").fetchone()
            return row["count"]

    @staticmethod
    def _row_to_contact_read(row: sqlite3.Row) -> ContactRead:
        """Convert a database row to a ContactRead schema instance."""
        return ContactRead(
            id=row["id"],
            email=row["email"],
            name=row["name"],
            phone=row["phone"],
            company=row["company"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
