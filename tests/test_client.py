# tests/test_client.py

from __future__ import annotations

import pytest
import requests

from task_tracker_client import TaskTrackerAPI

from .fakes import FakeResponse, FakeSession

BASE = "http://tasks.local"


def test_sign_in_stores_token_for_later_calls():
    session = FakeSession(
        FakeResponse(200, {"access_token": "tok123", "token_type": "bearer"}),
        FakeResponse(200, []),
    )
    api = TaskTrackerAPI(base_url=BASE + "/", session=session)

    token, error = api.sign_in("alice", "Passw0rd!")
    tasks, _ = api.list_tasks()

    assert (token, error) == ("tok123", None)
    assert tasks == []
    first, second = session.requests
    assert first["url"] == f"{BASE}/api/v1/auth/signin"
    assert "Authorization" not in first["headers"]
    assert second["headers"]["Authorization"] == "Bearer tok123"


def test_list_tasks_sends_only_given_filters():
    session = FakeSession(FakeResponse(200, [{"id": 1, "status": "OPEN"}]))
    api = TaskTrackerAPI(base_url=BASE, api_key="t", session=session)

    tasks, error = api.list_tasks(status="OPEN")

    assert error is None
    assert tasks == [{"id": 1, "status": "OPEN"}]
    assert session.requests[0]["params"] == {"status": "OPEN"}


def test_update_task_status_uses_patch():
    session = FakeSession(FakeResponse(200, {"id": 7, "status": "DONE"}))
    api = TaskTrackerAPI(base_url=BASE, api_key="t", session=session)

    task, error = api.update_task_status(7, "DONE")

    assert error is None and task["status"] == "DONE"
    sent = session.requests[0]
    assert (sent["method"], sent["url"], sent["json"]) == (
        "PATCH",
        f"{BASE}/api/v1/tasks/7/status",
        {"status": "DONE"},
    )


def test_not_found_is_reported_as_error_tuple():
    session = FakeSession(FakeResponse(404, {"detail": 'Task with ID "7" not found'}))
    api = TaskTrackerAPI(base_url=BASE, api_key="t", session=session)

    task, error = api.get_task(7)

    assert task is None
    assert error == {"status_code": 404, "message": 'Task with ID "7" not found'}


def test_validation_errors_are_flattened():
    detail = [{"loc": ["body", "title"], "msg": "String should have at least 1 character"}]
    session = FakeSession(FakeResponse(422, {"detail": detail}))
    api = TaskTrackerAPI(base_url=BASE, api_key="t", session=session)

    _, error = api.create_task("", "x")

    assert error["status_code"] == 422
    assert error["message"] == "String should have at least 1 character"


def test_delete_task_success_and_connection_failure():
    session = FakeSession(
        FakeResponse(204),
        requests.ConnectionError("connection refused"),
    )
    api = TaskTrackerAPI(base_url=BASE, api_key="t", session=session)

    assert api.delete_task(3) == (True, None)
    ok, error = api.delete_task(3)
    assert ok is False
    assert error == {"status_code": None, "message": "connection refused"}


def test_constructor_is_keyword_only_and_forwards_timeout():
    session = FakeSession(FakeResponse(200, {"id": 1}))
    api = TaskTrackerAPI(base_url=BASE, api_key="t", session=session, timeout=2.5)

    api.get_task(1)

    assert session.requests[0]["timeout"] == 2.5
    with pytest.raises(TypeError):
        TaskTrackerAPI(BASE)
