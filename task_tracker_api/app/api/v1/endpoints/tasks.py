"""
Task endpoints for API v1.

Every route requires a bearer token and acts only on the tasks of the
authenticated user.  Service errors are mapped to HTTP here:
``NotFoundError`` becomes 404 and ``InvalidStatusError`` becomes 400.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from task_tracker_api.app.core.exceptions import InvalidStatusError, NotFoundError
from task_tracker_api.app.core.security import get_current_user
from task_tracker_api.app.schemas.task import (
    TaskCreate,
    TaskFilter,
    TaskRead,
    TaskStatus,
    TaskStatusUpdate,
)
from task_tracker_api.app.schemas.user import UserRead
from task_tracker_api.app.services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_task_service() -> TaskService:
    """Dependency returning a ``TaskService`` backed by SQLite."""
    return TaskService()


@router.get("", response_model=List[TaskRead])
async def get_tasks(
    status_filter: Optional[TaskStatus] = Query(None, alias="status"),
    search: Optional[str] = Query(None, description="Case-insensitive text in title or description"),
    user: UserRead = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> List[TaskRead]:
    """List the user's tasks, optionally filtered by status and text."""
    filter_dto = TaskFilter(status=status_filter, search=search)
    logger.debug(
        'User "%s" retrieving all tasks. Filters: %s',
        user.username,
        filter_dto.model_dump(exclude_none=True, mode="json"),
    )
    return await service.get_tasks(filter_dto, user)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task_by_id(
    task_id: int,
    user: UserRead = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> TaskRead:
    """Return a single task.  404 if it does not exist or is not the user's."""
    try:
        return await service.get_task_by_id(task_id, user)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_in: TaskCreate,
    user: UserRead = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> TaskRead:
    """Create a task owned by the current user."""
    logger.debug('User "%s" creating a new task. Data: %s', user.username, task_in.model_dump())
    return await service.create_task(task_in, user)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int,
    user: UserRead = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> None:
    """Delete a task.  404 if it does not exist or is not the user's."""
    try:
        await service.delete_task_by_id(task_id, user)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return None


@router.patch("/{task_id}/status", response_model=TaskRead)
async def update_task_status(
    task_id: int,
    body: TaskStatusUpdate,
    user: UserRead = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
) -> TaskRead:
    """Change the status of a task.

    Responds 400 for an unknown status and 404 if the task does not
    exist or is not the user's.
    """
    try:
        return await service.update_task_status(task_id, body.status.upper(), user)
    except InvalidStatusError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
