"""SQLite persistence for user accounts."""

from __future__ import annotations

import sqlite3
from typing import Optional

from task_tracker_api.app.core.db import get_connection
from task_tracker_api.app.schemas.user import UserRead


class UserRepository:
    """Insert and look up rows of the ``users`` table."""

    async def create_user(self, username: str, password_hash: str) -> UserRead:
        """Insert a user.

        Raises ``sqlite3.IntegrityError`` when the username is taken.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO users (username, password) VALUES (?, ?)",
                (username, password_hash),
            )
            user_id = cursor.lastrowid
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()
        return UserRead(id=user_id, username=username)

    async def get_credentials(self, username: str) -> Optional[sqlite3.Row]:
        """Return ``id``, ``username`` and ``password`` for ``username``."""
        conn = get_connection()
        try:
            return conn.execute(
                "SELECT id, username, password FROM users WHERE username = ?",
                (username,),
            ).fetchone()
        finally:
            conn.close()

    async def get_by_username(self, username: str) -> Optional[UserRead]:
        row = await self.get_credentials(username)
        if row is None:
            return None
        return UserRead(id=row["id"], username=row["username"])

    async def set_password(self, username: str, password_hash: str) -> int:
        """Replace the stored hash; return the number of updated rows."""
        conn = get_connection()
        try:
            cursor = conn.execute(
                "UPDATE users SET password = ? WHERE username = ?",
                (password_hash, username),
            )
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()
