import logging
from uuid import UUID

from sqlalchemy.exc import OperationalError

from app.db.session import get_session
from app.main import app


def test_list_tasks_empty(client):
    resp = client.get("/tasks")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_tasks_returns_every_row(client, make_tasks):
    user_id = make_tasks(3)

    resp = client.get("/tasks")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 3
    assert sorted(t["title"] for t in data) == ["task 0", "task 1", "task 2"]
    for t in data:
        UUID(t["id"])
        assert t["completed"] is False
        assert t["user_id"] == str(user_id)
        assert set(t) >= {"id", "title", "description", "completed"}

    by_title = {t["title"]: t for t in data}
    assert by_title["task 0"]["description"] == "desc 0"
    assert by_title["task 1"]["description"] is None


class _BrokenSession:
    def exec(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))


def _broken_session():
    yield _BrokenSession()


def test_list_tasks_db_failure(client, caplog):
    app.dependency_overrides[get_session] = _broken_session

    with caplog.at_level(logging.ERROR, logger="app.routers.task"):
        resp = client.get("/tasks")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch tasks"}
    assert any("fetching tasks failed" in r.getMessage() for r in caplog.records)
    assert any(r.exc_info for r in caplog.records)


def test_tasks_only_supports_get(client):
    resp = client.post("/tasks", json={"title": "nope"})
    assert resp.status_code == 405
