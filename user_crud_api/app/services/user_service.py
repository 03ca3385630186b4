"""
Data-access operations for users.

``UserStore`` is the capability set the HTTP handlers depend on:
create, read one, update, delete and list.  ``SQLiteUserStore`` is the
relational implementation used by the running service; tests inject an
in-memory implementation of the same protocol.

None of the operations validates input beyond what the database
enforces through its constraints, and none retries, batches or
paginates.  Each call opens its own connection, so concurrent requests
never share a connection object.
"""

import logging
import sqlite3
from typing import List, Optional, Protocol

from user_crud_api.app.core.db import get_connection
from user_crud_api.app.core.exceptions import (
    DuplicateEmailError,
    StoreError,
    UserNotFoundError,
)
from user_crud_api.app.schemas.user import UserPayload, UserRead


logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """Operations a user store must provide."""

    def create(self, payload: UserPayload) -> None:
        ...

    def read_one(self, user_id: int) -> UserRead:
        ...

    def update(self, user_id: int, payload: UserPayload) -> None:
        ...

    def delete(self, user_id: int) -> None:
        ...

    def list_all(self) -> List[UserRead]:
        ...


class SQLiteUserStore:
    """User store backed by the ``users`` table of a SQLite database.

    The schema must already exist (see ``core.db.init_db``).
    """

    def __init__(self, database_path: Optional[str] = None):
        self.database_path = database_path

    def _connect(self) -> sqlite3.Connection:
        try:
            return get_connection(self.database_path)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open user database: {e}") from e

    @staticmethod
    def _translate(error: sqlite3.Error, payload: Optional[UserPayload] = None) -> StoreError:
        if isinstance(error, sqlite3.IntegrityError) and payload is not None:
            if "users.email" in str(error):
                return DuplicateEmailError(payload.email)
        return StoreError(str(error))

    def create(self, payload: UserPayload) -> None:
        """Insert a new row; the database assigns the id."""
        conn = self._connect()
        try:
            cursor = conn.execute(
                "INSERT INTO users (name, email, age) VALUES (?, ?, ?)",
                (payload.name, payload.email, payload.age),
            )
            conn.commit()
            logger.info("Created user %s <%s>", cursor.lastrowid, payload.email)
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Failed to create user <%s>: %s", payload.email, e)
            raise self._translate(e, payload) from e
        finally:
            conn.close()

    def read_one(self, user_id: int) -> UserRead:
        """Return the row with primary key ``user_id``.

        Raises ``UserNotFoundError`` when no row matches.
        """
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, name, email, age FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        except sqlite3.Error as e:
            logger.error("Failed to read user %s: %s", user_id, e)
            raise self._translate(e) from e
        finally:
            conn.close()
        if row is None:
            raise UserNotFoundError(user_id)
        return UserRead.model_validate(dict(row))

    def update(self, user_id: int, payload: UserPayload) -> None:
        """Overwrite every field of the row at ``user_id``.

        This is a whole-record replace, not a patch.  Updating an id
        that does not exist affects no rows and is not an error.
        """
        conn = self._connect()
        try:
            cursor = conn.execute(
                "UPDATE users SET name = ?, email = ?, age = ? WHERE id = ?",
                (payload.name, payload.email, payload.age, user_id),
            )
            conn.commit()
            if cursor.rowcount:
                logger.info("Updated user %s", user_id)
            else:
                logger.info("Update of user %s matched no rows", user_id)
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Failed to update user %s: %s", user_id, e)
            raise self._translate(e, payload) from e
        finally:
            conn.close()

    def delete(self, user_id: int) -> None:
        """Remove the row at ``user_id``; a missing row is a no-op."""
        conn = self._connect()
        try:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            conn.commit()
            logger.info("Deleted user %s (%s row(s))", user_id, cursor.rowcount)
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Failed to delete user %s: %s", user_id, e)
            raise self._translate(e) from e
        finally:
            conn.close()

    def list_all(self) -> List[UserRead]:
        """Return every row ordered by id; an empty table yields ``[]``."""
        conn = self._connect()
        try:
            rows = conn.execute(
                "SELECT id, name, email, age FROM users ORDER BY id"
            ).fetchall()
        except sqlite3.Error as e:
            logger.error("Failed to list users: %s", e)
            raise self._translate(e) from e
        finally:
            conn.close()
        return [UserRead.model_validate(dict(row)) for row in rows]
