import logging

import pytest
from fastapi.testclient import TestClient

from task_service import main
from task_service.main import app


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_startup_seeds_sample_tasks() -> None:
    if hasattr(app.state, "store"):
        del app.state.store

    with TestClient(app) as client:
        response = client.get("/tasks")
        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [1, 2]
        assert client.get("/tasks/priority/low").json() == response.json()


def test_startup_without_seeding_gives_empty_store(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "SEED_SAMPLE_TASKS", False)

    with TestClient(app) as client:
        assert client.get("/tasks").json() == []
        response = client.post("/tasks", json={"title": "A", "description": "B", "completed": False})
        assert response.json()["id"] == 1


def test_startup_configures_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "LOG_LEVEL", "DEBUG")

    with TestClient(app):
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
