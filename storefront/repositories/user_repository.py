"""
Repository layer for User persistence.
All SQL for the `app_user` table lives here.
"""
import sqlite3
from typing import Optional
from datetime import datetime, timezone
from uuid import UUID
import logging

from storefront.core.logging_config import log_db_timing
from storefront.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Data access layer for user records."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Store the database connection for query execution."""
        logger.trace("Initializing UserRepository")
        self._conn = conn

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @log_db_timing
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by id or None if missing."""
        row = self._conn.execute(
            "SELECT * FROM app_user WHERE id = ?", (user_id,)
        ).fetchone()
        return User.from_row(row) if row else None

    @log_db_timing
    def get_by_uid(self, uid: UUID) -> Optional[User]:
        """Return a user by its public UUID or None if missing."""
        row = self._conn.execute(
            "SELECT * FROM app_user WHERE uid = ?", (str(uid),)
        ).fetchone()
        return User.from_row(row) if row else None

    @log_db_timing
    def get_by_username(self, username: str) -> Optional[User]:
        """Return a user by username (case-insensitive) or None if missing."""
        row = self._conn.execute(
            "SELECT * FROM app_user WHERE lower(username) = lower(?)", (username,)
        ).fetchone()
        return User.from_row(row) if row else None

    @log_db_timing
    def list_all(self) -> list[User]:
        rows = self._conn.execute("SELECT * FROM app_user ORDER BY id").fetchall()
        return [User.from_row(r) for r in rows]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @log_db_timing
    def create(self, user: User) -> User:
        """Insert a new user row and return the created user."""
        logger.info("Creating user record username=%s", user.username)
        now = datetime.now(tz=timezone.utc).isoformat()
        cursor = self._conn.execute(
            """
            INSERT INTO app_user
                (uid, first_name, last_name, username, role, password,
                 is_enabled, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                str(user.uid),
                user.first_name,
                user.last_name,
                user.username,
                user.role.value,
                user.password,
                int(user.is_enabled),
                now,
                now,
            ),
        )
        return self.get_by_id(cursor.lastrowid)  # type: ignore[return-value]

    @log_db_timing
    def delete(self, user_id: int) -> bool:
        logger.info("Deleting user id=%s", user_id)
        cursor = self._conn.execute("DELETE FROM app_user WHERE id = ?", (user_id,))
        logger.info("User delete affected %s rows", cursor.rowcount)
        return cursor.rowcount > 0
