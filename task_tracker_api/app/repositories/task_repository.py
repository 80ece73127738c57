"""
SQLite persistence for tasks.

Every read and write is scoped by the owner's ``user_id``: a task owned
by somebody else behaves exactly like a task that does not exist.  The
repository reports absence (``None`` or a zero row count) and leaves it
to ``TaskService`` to turn that into ``NotFoundError``.

Store failures are logged with the owner and the operation, then
re-raised unchanged.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from task_tracker_api.app.core.db import get_connection
from task_tracker_api.app.schemas.task import TaskCreate, TaskFilter, TaskRead, TaskStatus
from task_tracker_api.app.schemas.user import UserRead

logger = logging.getLogger(__name__)

_TASK_COLUMNS = "id, title, description, status, user_id"


def _like_pattern(text: str) -> str:
    """Build a ``LIKE`` pattern matching ``text`` literally anywhere."""
    escaped = text.casefold().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class TaskRepository:
    """Owner-scoped CRUD primitives over the ``tasks`` table."""

    async def get_tasks(self, filter_dto: TaskFilter, user_id: int) -> List[TaskRead]:
        """Return the tasks of ``user_id`` matching ``filter_dto``, oldest first."""
        clauses = ["user_id = ?"]
        params: list = [user_id]
        if filter_dto.status is not None:
            clauses.append("status = ?")
            params.append(TaskStatus(filter_dto.status).value)
        if filter_dto.search:
            clauses.append(
                "(casefold(title) LIKE ? ESCAPE '\\' OR casefold(description) LIKE ? ESCAPE '\\')"
            )
            pattern = _like_pattern(filter_dto.search)
            params.extend([pattern, pattern])
        query = f"SELECT {_TASK_COLUMNS} FROM tasks WHERE {' AND '.join(clauses)} ORDER BY id ASC"

        conn = get_connection()
        try:
            rows = conn.execute(query, tuple(params)).fetchall()
        except sqlite3.Error:
            logger.error(
                "Failed to get tasks for user %s. Filters: %s",
                user_id,
                filter_dto.model_dump(exclude_none=True),
            )
            raise
        finally:
            conn.close()
        return [self._row_to_task(row) for row in rows]

    async def find_one(self, task_id: int, user_id: int) -> Optional[TaskRead]:
        """Return the task ``task_id`` if ``user_id`` owns it, else ``None``."""
        conn = get_connection()
        try:
            row = conn.execute(
                f"SELECT {_TASK_COLUMNS} FROM tasks WHERE id = ? AND user_id = ?",
                (task_id, user_id),
            ).fetchone()
        except sqlite3.Error:
            logger.error("Failed to find task %s for user %s", task_id, user_id)
            raise
        finally:
            conn.close()
        return self._row_to_task(row) if row else None

    async def create_task(self, data: TaskCreate, user: UserRead) -> TaskRead:
        """Insert a new ``OPEN`` task owned by ``user``."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO tasks (title, description, status, user_id) VALUES (?, ?, ?, ?)",
                (data.title, data.description, TaskStatus.OPEN.value, user.id),
            )
            task_id = cursor.lastrowid
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            logger.error(
                "Failed to create task for user %s. Data: %s", user.id, data.model_dump()
            )
            raise
        finally:
            conn.close()
        return TaskRead(
            id=task_id,
            title=data.title,
            description=data.description,
            status=TaskStatus.OPEN,
            user_id=user.id,
        )

    async def delete(self, task_id: int, user_id: int) -> int:
        """Delete the task if ``user_id`` owns it; return the affected row count."""
        conn = get_connection()
        try:
            cursor = conn.execute(
                "DELETE FROM tasks WHERE id = ? AND user_id = ?",
                (task_id, user_id),
            )
            affected = cursor.rowcount
            conn.commit()
            return affected
        except sqlite3.Error:
            conn.rollback()
            logger.error("Failed to delete task %s for user %s", task_id, user_id)
            raise
        finally:
            conn.close()

    async def save(self, task: TaskRead) -> TaskRead:
        """Persist title, description and status of an existing task.

        The owner column is part of the ``WHERE`` clause and is never
        written, so ownership cannot change through this call.
        """
        conn = get_connection()
        try:
            conn.execute(
                """
                UPDATE tasks
                SET title = ?, description = ?, status = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ? AND user_id = ?
                """,
                (
                    task.title,
                    task.description,
                    TaskStatus(task.status).value,
                    task.id,
                    task.user_id,
                ),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            logger.error("Failed to save task %s for user %s", task.id, task.user_id)
            raise
        finally:
            conn.close()
        return task

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> TaskRead:
        """Convert a database row to a ``TaskRead`` instance."""
        return TaskRead(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            status=TaskStatus(row["status"]),
            user_id=row["user_id"],
        )
