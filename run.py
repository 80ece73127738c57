"""Entry point for the Task Tracker API.

Serves the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Configuration (database path, secret key, host and port) is read from
environment variables; see ``task_tracker_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from task_tracker_api.app.core.config import settings
from task_tracker_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the API until interrupted."""
    logger.info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
