"""
Top-level router for version 1 of the API.

Aggregates the domain routers under a unified prefix (``/api/v1`` is
added by ``main.create_app``).
"""

from fastapi import APIRouter

from .endpoints import auth, tasks

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
