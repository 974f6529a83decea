import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import Priority
from ..schemas.task import Message, Task as TaskSchema, TaskCreate, TaskUpdate
from ..store import TaskStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()

TASK_NOT_FOUND = "Task not found"
INVALID_PRIORITY = "Invalid priority level. Please use 'low', 'medium', or 'high'."


def _parse_task_id(task_id: str) -> int:
    """Path ids that are not plain ASCII digits can never match a task."""
    if not (task_id.isascii() and task_id.isdigit()):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)
    return int(task_id)


def _not_found(task_id) -> HTTPException:
    logger.debug("Task %s not found", task_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=TASK_NOT_FOUND)


@router.get("/tasks", response_model=List[TaskSchema])
def get_tasks(
    completed: Optional[str] = None,
    sort: Optional[str] = None,
    store: TaskStore = Depends(get_store),
):
    """Get all tasks, optionally filtered by completion and sorted by creation time.

    `completed=true` keeps completed tasks; any other value keeps open ones.
    `sort=asc` lists oldest first; any other non-empty value newest first.
    """
    completed_filter = None if completed is None else completed == "true"
    return store.list_all(completed=completed_filter, sort=sort)


@router.get("/tasks/priority/{level}", response_model=List[TaskSchema])
def get_tasks_by_priority(level: str, store: TaskStore = Depends(get_store)):
    """Get all tasks with the given priority level."""
    try:
        priority = Priority(level)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PRIORITY)
    return store.by_priority(priority)


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, store: TaskStore = Depends(get_store)):
    """Create a new task. Priority defaults to low."""
    return store.create(
        title=task.title,
        description=task.description,
        completed=task.completed,
        priority=task.priority,
    )


@router.get("/tasks/{task_id}", response_model=TaskSchema)
def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Get a specific task by ID."""
    task = store.get(_parse_task_id(task_id))
    if not task:
        raise _not_found(task_id)
    return task


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(task_id: str, task_update: TaskUpdate, store: TaskStore = Depends(get_store)):
    """Replace title, description and completed status of a task."""
    task = store.update(
        _parse_task_id(task_id),
        title=task_update.title,
        description=task_update.description,
        completed=task_update.completed,
    )
    if not task:
        raise _not_found(task_id)
    return task


@router.delete("/tasks/{task_id}", response_model=Message)
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a specific task."""
    if not store.delete(_parse_task_id(task_id)):
        raise _not_found(task_id)
    return {"message": "Task deleted successfully"}
