import pytest
from pydantic import ValidationError

from task_service.models import Priority
from task_service.schemas.task import Task as TaskSchema, TaskCreate, TaskUpdate
from task_service.store import TaskStore


def test_create_defaults_priority_to_low() -> None:
    task = TaskCreate(title="A", description="B", completed=False)
    assert task.priority == Priority.LOW


@pytest.mark.parametrize(
    "payload",
    [
        {"description": "B", "completed": False},
        {"title": "", "description": "B", "completed": False},
        {"title": "A", "description": "", "completed": False},
        {"title": 1, "description": "B", "completed": False},
        {"title": "A", "description": "B"},
        {"title": "A", "description": "B", "completed": "false"},
        {"title": "A", "description": "B", "completed": 0},
        {"title": "A", "description": "B", "completed": False, "priority": "HIGH"},
        {"title": "A", "description": "B", "completed": False, "priority": None},
    ],
)
def test_create_rejects_invalid_payloads(payload: dict) -> None:
    with pytest.raises(ValidationError):
        TaskCreate.model_validate(payload)


def test_update_ignores_priority() -> None:
    update = TaskUpdate.model_validate(
        {"title": "A", "description": "B", "completed": True, "priority": "bogus"}
    )
    assert update.model_dump() == {"title": "A", "description": "B", "completed": True}


def test_task_schema_uses_camel_case_timestamps() -> None:
    task = TaskStore.with_sample_tasks().get(1)
    data = TaskSchema.model_validate(task.model_dump()).model_dump(by_alias=True, mode="json")
    assert set(data) == {"id", "title", "description", "completed", "priority", "createdAt", "updatedAt"}
    assert data["priority"] == "low"
