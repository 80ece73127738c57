"""
Pydantic models for tasks.

A task is a unit of work owned by exactly one user.  ``TaskRead`` is
both the API response model and the record returned by
``TaskRepository``; ``TaskCreate``, ``TaskFilter`` and
``TaskStatusUpdate`` describe the request payloads.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Lifecycle state of a task.  Any state may move to any other."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskCreate(BaseModel):
    """Payload for creating a task.  New tasks always start ``OPEN``."""

    title: str = Field(..., min_length=1, description="Short title of the task")
    description: str = Field(..., min_length=1, description="Free-form description")


class TaskFilter(BaseModel):
    """Filters for listing tasks.

    ``status`` restricts the result to one status.  ``search`` keeps
    tasks whose title or description contains the text, ignoring case;
    an empty string matches everything.  Both filters combine with AND.
    """

    status: Optional[TaskStatus] = None
    search: Optional[str] = None


class TaskStatusUpdate(BaseModel):
    """Payload for ``PATCH /tasks/{id}/status``.

    ``status`` is accepted as a plain string and checked by the service
    so that unknown values produce a 400 with a readable message.
    """

    status: str = Field(..., description="One of OPEN, IN_PROGRESS, DONE")


class TaskRead(BaseModel):
    """A persisted task."""

    id: int
    title: str
    description: str
    status: TaskStatus = TaskStatus.OPEN
    user_id: int

    model_config = {
        "from_attributes": True,
    }
