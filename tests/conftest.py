# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from task_tracker_api.app.core.config import settings
from task_tracker_api.app.core.db import get_cursor, init_db
from task_tracker_api.app.schemas.user import UserRead


@pytest.fixture()
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the application at a fresh SQLite file and apply migrations.

    ``settings`` is a module-level singleton read on every connection,
    so patching its attribute is enough to isolate each test.
    """
    path = tmp_path / "tasks.sqlite3"
    monkeypatch.setattr(settings, "database_url", str(path))
    monkeypatch.setattr(settings, "secret_key", "test-secret")
    init_db()
    return path


def _insert_user(username: str) -> UserRead:
    with get_cursor() as cursor:
        cursor.execute(
            "INSERT INTO users (username, password) VALUES (?, ?)",
            (username, "not-a-real-hash"),
        )
        return UserRead(id=cursor.lastrowid, username=username)


@pytest.fixture()
def owner(db_path: Path) -> UserRead:
    return _insert_user("owner")


@pytest.fixture()
def other_user(db_path: Path) -> UserRead:
    return _insert_user("intruder")


@pytest.fixture()
def client(db_path: Path) -> Iterator[TestClient]:
    """TestClient with startup hooks run (migrations on the temp DB)."""
    from task_tracker_api.app.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
