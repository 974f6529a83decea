import logging
import threading
from typing import Iterable, List, Optional

from fastapi import Request

from .models import Priority, Task
from .models.task import utcnow

logger = logging.getLogger(__name__)

SAMPLE_TASKS = (
    {"title": "Sample Task 1", "description": "This is a sample task", "completed": False},
    {"title": "Sample Task 2", "description": "This is another task", "completed": True},
)


class TaskStore:
    """Ordered in-memory collection of tasks.

    Every accessor runs under one lock since sync handlers run in a
    threadpool. Ids come from a counter that only moves forward and are
    never reused after deletions.
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._lock = threading.Lock()
        self._tasks: List[Task] = list(tasks)
        self._next_id = max((task.id for task in self._tasks), default=0) + 1

    @classmethod
    def with_sample_tasks(cls) -> "TaskStore":
        store = cls()
        for sample in SAMPLE_TASKS:
            store.create(**sample)
        return store

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return -1

    def list_all(self, completed: Optional[bool] = None, sort: Optional[str] = None) -> List[Task]:
        """Return a filtered and optionally sorted copy of the collection.

        `sort == "asc"` orders oldest first; any other non-empty value orders
        newest first. The stored order is never touched.
        """
        with self._lock:
            tasks = list(self._tasks)

        if completed is not None:
            tasks = [task for task in tasks if task.completed == completed]

        if sort:
            # ids follow creation order and, unlike the wall clock, never go back
            tasks.sort(key=lambda t: t.id, reverse=sort != "asc")

        return tasks

    def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            index = self._index_of(task_id)
            return self._tasks[index] if index != -1 else None

    def create(
        self,
        title: str,
        description: str,
        completed: bool,
        priority: Priority = Priority.LOW,
    ) -> Task:
        with self._lock:
            now = utcnow()
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                completed=completed,
                priority=priority,
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._tasks.append(task)

        logger.info("Created task %d (priority=%s)", task.id, task.priority.value)
        return task

    def update(self, task_id: int, title: str, description: str, completed: bool) -> Optional[Task]:
        """Replace title, description and completed of a task.

        Id, priority and creation time carry over from the old record.
        Returns None when no task has that id.
        """
        with self._lock:
            index = self._index_of(task_id)
            if index == -1:
                return None

            current = self._tasks[index]
            task = Task(
                id=current.id,
                title=title,
                description=description,
                completed=completed,
                priority=current.priority,
                created_at=current.created_at,
                updated_at=utcnow(),
            )
            self._tasks[index] = task

        logger.info("Updated task %d", task_id)
        return task

    def delete(self, task_id: int) -> bool:
        with self._lock:
            index = self._index_of(task_id)
            if index == -1:
                return False
            del self._tasks[index]

        logger.info("Deleted task %d", task_id)
        return True

    def by_priority(self, priority: Priority) -> List[Task]:
        with self._lock:
            return [task for task in self._tasks if task.priority == priority]


def get_store(request: Request) -> TaskStore:
    """Dependency to get the application's task store."""
    return request.app.state.store
