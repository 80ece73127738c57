"""
Domain errors raised by the service layer.

Services never raise ``HTTPException``; the routers translate these
errors into HTTP responses.  Store failures (``sqlite3.Error``) are not
wrapped and propagate unchanged.
"""


class TaskTrackerError(Exception):
    """Base class for all domain errors of the Task Tracker API."""


class NotFoundError(TaskTrackerError, LookupError):
    """An owner-scoped lookup or mutation matched no rows."""


class InvalidStatusError(TaskTrackerError, ValueError):
    """A task status outside of ``TaskStatus`` was supplied."""

    def __init__(self, value: object) -> None:
        super().__init__(f"{value} is an invalid status")
        self.value = value


class ConflictError(TaskTrackerError):
    """A unique constraint (e.g. username) would be violated."""


class AuthenticationError(TaskTrackerError):
    """Sign-in credentials did not match a stored user."""
