"""
Application package for the Task Tracker API.

Subpackages:

* ``core`` – settings, logging, database access, security helpers and
  domain errors.
* ``schemas`` – Pydantic request/response models.
* ``repositories`` – persistence of rows in SQLite.
* ``services`` – business rules on top of the repositories.
* ``api`` – versioned FastAPI routers.
"""
