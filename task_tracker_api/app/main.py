"""
Main entrypoint for the Task Tracker API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app`` so it
can be served directly, e.g.::

    uvicorn task_tracker_api.app.main:app --reload

The application title and version come from ``Settings`` in
``core.config``.
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first so that startup messages are visible.
    The database schema is brought up to date when the app starts.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()

    return app


app = create_app()
