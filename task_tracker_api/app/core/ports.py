"""
Ports (interfaces) used by the service layer.

Services depend on these Protocols instead of concrete repositories so
that the SQLite implementation can be replaced by a fake in tests.
"""

from __future__ import annotations

from typing import Optional, Protocol

from ..schemas.task import TaskCreate, TaskFilter, TaskRead
from ..schemas.user import UserRead


class TaskStore(Protocol):
    """Owner-scoped persistence of tasks."""

    async def get_tasks(self, filter_dto: TaskFilter, user_id: int) -> list[TaskRead]: ...

    async def find_one(self, task_id: int, user_id: int) -> Optional[TaskRead]: ...

    async def create_task(self, data: TaskCreate, user: UserRead) -> TaskRead: ...

    async def delete(self, task_id: int, user_id: int) -> int:
        """Return the number of removed rows (0 or 1)."""
        ...

    async def save(self, task: TaskRead) -> TaskRead: ...
