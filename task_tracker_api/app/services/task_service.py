"""
Business rules for personal tasks.

``TaskService`` is the only component that decides what a missing row
means.  The store answers owner-scoped questions ("does this user own
task 7?") and the service turns a negative answer into
``NotFoundError``.  Because the owner id is part of every store call, a
task belonging to somebody else is indistinguishable from one that does
not exist.

Store failures are not caught here; they reach the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from task_tracker_api.app.core.exceptions import InvalidStatusError, NotFoundError
from task_tracker_api.app.core.ports import TaskStore
from task_tracker_api.app.repositories.task_repository import TaskRepository
from task_tracker_api.app.schemas.task import TaskCreate, TaskFilter, TaskRead, TaskStatus
from task_tracker_api.app.schemas.user import UserRead

logger = logging.getLogger(__name__)


class TaskService:
    """Service for listing, creating, updating and deleting a user's tasks."""

    def __init__(self, repository: Optional[TaskStore] = None) -> None:
        self.repository: TaskStore = repository or TaskRepository()

    async def get_tasks(self, filter_dto: TaskFilter, user: UserRead) -> List[TaskRead]:
        """Return the user's tasks matching ``filter_dto``."""
        return await self.repository.get_tasks(filter_dto, user.id)

    async def get_task_by_id(self, task_id: int, user: UserRead) -> TaskRead:
        """Return one of the user's tasks.

        Raises
        ------
        NotFoundError
            If the task does not exist or belongs to another user.
        """
        found = await self.repository.find_one(task_id, user.id)
        if not found:
            raise NotFoundError(f'Task with ID "{task_id}" not found')
        return found

    async def create_task(self, data: TaskCreate, user: UserRead) -> TaskRead:
        """Create an ``OPEN`` task owned by ``user``."""
        task = await self.repository.create_task(data, user)
        logger.info("User %s created task %s", user.id, task.id)
        return task

    async def delete_task_by_id(self, task_id: int, user: UserRead) -> None:
        """Delete one of the user's tasks.

        Raises
        ------
        NotFoundError
            If no row owned by the user was removed.
        """
        affected = await self.repository.delete(task_id, user.id)
        if affected == 0:
            raise NotFoundError(f'Task with ID "{task_id}" not found')
        logger.info("User %s deleted task %s", user.id, task_id)

    async def update_task_status(
        self,
        task_id: int,
        status: Union[TaskStatus, str],
        user: UserRead,
    ) -> TaskRead:
        """Set the status of one of the user's tasks and return it.

        Only ``status`` changes; any status may move to any other.

        Raises
        ------
        InvalidStatusError
            If ``status`` is not a ``TaskStatus`` value.  Checked before
            the store is touched.
        NotFoundError
            If the task does not exist or belongs to another user.
        """
        new_status = self._coerce_status(status)
        task = await self.get_task_by_id(task_id, user)
        previous = task.status
        task.status = new_status
        await self.repository.save(task)
        logger.info(
            "User %s moved task %s from %s to %s",
            user.id,
            task_id,
            TaskStatus(previous).value,
            new_status.value,
        )
        return task

    @staticmethod
    def _coerce_status(value: Union[TaskStatus, str]) -> TaskStatus:
        try:
            return TaskStatus(value)
        except ValueError:
            raise InvalidStatusError(value) from None
