import pytest
from fastapi.testclient import TestClient

from task_service.main import app
from task_service.store import TaskStore


@pytest.fixture
def store() -> TaskStore:
    return TaskStore.with_sample_tasks()


@pytest.fixture
def client(store: TaskStore) -> TestClient:
    app.state.store = store
    return TestClient(app)
