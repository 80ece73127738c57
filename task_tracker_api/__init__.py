"""
Task Tracker API package.

The FastAPI application lives in ``task_tracker_api.app``; see
``task_tracker_api.app.main`` for the ASGI entry point.
"""
