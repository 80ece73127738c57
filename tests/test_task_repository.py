# tests/test_task_repository.py

from __future__ import annotations

import logging
import sqlite3

import pytest

from task_tracker_api.app.core.db import get_connection
from task_tracker_api.app.repositories.task_repository import TaskRepository
from task_tracker_api.app.schemas.task import TaskCreate, TaskFilter, TaskStatus

pytestmark = pytest.mark.asyncio


@pytest.fixture()
def repo(db_path) -> TaskRepository:
    return TaskRepository()


async def _seed(repo: TaskRepository, owner, other_user):
    """Three tasks for ``owner`` (OPEN, IN_PROGRESS, DONE) and one for ``other_user``."""
    groceries = await repo.create_task(
        TaskCreate(title="Buy groceries", description="Milk and BREAD"), owner
    )
    report = await repo.create_task(
        TaskCreate(title="Quarterly report", description="Finish the draft"), owner
    )
    gym = await repo.create_task(TaskCreate(title="Gym", description="Leg day"), owner)
    foreign = await repo.create_task(
        TaskCreate(title="Buy groceries", description="Someone else's list"), other_user
    )
    await repo.save(report.model_copy(update={"status": TaskStatus.IN_PROGRESS}))
    await repo.save(gym.model_copy(update={"status": TaskStatus.DONE}))
    return groceries, report, gym, foreign


async def test_create_task_assigns_id_status_and_owner(repo, owner):
    first = await repo.create_task(TaskCreate(title="A", description="a"), owner)
    second = await repo.create_task(TaskCreate(title="B", description="b"), owner)

    assert second.id > first.id
    assert first.status == TaskStatus.OPEN
    assert first.user_id == owner.id
    assert await repo.find_one(first.id, owner.id) == first


async def test_find_one_is_scoped_by_owner(repo, owner, other_user):
    task = await repo.create_task(TaskCreate(title="Mine", description="only mine"), owner)

    assert await repo.find_one(task.id, other_user.id) is None
    assert await repo.find_one(task.id + 100, owner.id) is None


async def test_get_tasks_without_filters_returns_owned_set(repo, owner, other_user):
    groceries, report, gym, _ = await _seed(repo, owner, other_user)

    tasks = await repo.get_tasks(TaskFilter(), owner.id)

    assert [t.id for t in tasks] == [groceries.id, report.id, gym.id]


async def test_get_tasks_status_filter_with_empty_search(repo, owner, other_user):
    groceries, _, _, _ = await _seed(repo, owner, other_user)

    tasks = await repo.get_tasks(TaskFilter(status=TaskStatus.OPEN, search=""), owner.id)

    assert [t.id for t in tasks] == [groceries.id]


async def test_get_tasks_search_matches_title_or_description_ignoring_case(repo, owner, other_user):
    groceries, report, _, _ = await _seed(repo, owner, other_user)

    by_description = await repo.get_tasks(TaskFilter(search="bread"), owner.id)
    by_title = await repo.get_tasks(TaskFilter(search="REPORT"), owner.id)

    assert [t.id for t in by_description] == [groceries.id]
    assert [t.id for t in by_title] == [report.id]

    apples = await repo.create_task(TaskCreate(title="Über Äpfel", description="Obst"), owner)
    for text in ("ÄPFEL", "äpfel", "Äpfel", "über"):
        found = await repo.get_tasks(TaskFilter(search=text), owner.id)
        assert [t.id for t in found] == [apples.id], text


async def test_get_tasks_filters_combine_with_and(repo, owner, other_user):
    await _seed(repo, owner, other_user)

    tasks = await repo.get_tasks(TaskFilter(status=TaskStatus.DONE, search="groceries"), owner.id)

    assert tasks == []


async def test_get_tasks_search_treats_wildcards_literally(repo, owner):
    discount = await repo.create_task(TaskCreate(title="Sale", description="50% off"), owner)
    await repo.create_task(TaskCreate(title="Plain", description="500 items"), owner)

    tasks = await repo.get_tasks(TaskFilter(search="0%"), owner.id)

    assert [t.id for t in tasks] == [discount.id]


async def test_delete_returns_affected_count(repo, owner, other_user):
    task = await repo.create_task(TaskCreate(title="Temp", description="remove me"), owner)

    assert await repo.delete(task.id, other_user.id) == 0
    assert await repo.find_one(task.id, owner.id) is not None
    assert await repo.delete(task.id, owner.id) == 1
    assert await repo.delete(task.id, owner.id) == 0


async def test_save_updates_status_without_touching_owner(repo, owner, other_user):
    task = await repo.create_task(TaskCreate(title="Keep", description="owner fixed"), owner)

    # A record claiming another owner must not move or modify the row.
    await repo.save(task.model_copy(update={"user_id": other_user.id, "status": TaskStatus.DONE}))
    assert (await repo.find_one(task.id, owner.id)).status == TaskStatus.OPEN

    await repo.save(task.model_copy(update={"status": TaskStatus.DONE}))
    stored = await repo.find_one(task.id, owner.id)
    assert stored.status == TaskStatus.DONE
    assert stored.user_id == owner.id


async def test_deleting_user_cascades_to_tasks(repo, owner):
    task = await repo.create_task(TaskCreate(title="Orphan", description="?"), owner)

    conn = get_connection()
    try:
        conn.execute("DELETE FROM users WHERE id = ?", (owner.id,))
        conn.commit()
    finally:
        conn.close()

    assert await repo.find_one(task.id, owner.id) is None


async def test_find_one_logs_and_reraises_store_failure(repo, owner, monkeypatch, caplog):
    # A connection without the schema makes every query fail.
    monkeypatch.setattr(
        "task_tracker_api.app.repositories.task_repository.get_connection",
        lambda: sqlite3.connect(":memory:"),
    )

    with caplog.at_level(logging.ERROR):
        with pytest.raises(sqlite3.OperationalError):
            await repo.find_one(42, owner.id)

    assert f"Failed to find task 42 for user {owner.id}" in caplog.text
