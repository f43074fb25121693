"""In-memory task storage.

Tasks live for the lifetime of the process. Every operation runs under a
single lock, so id assignment and list mutation stay atomic for callers on
any thread. The async request handlers share the event loop and do not need it.
"""

import logging
import threading

from task_service.models import Task, TaskInput

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered in-memory task storage with a monotonically increasing id."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        self._tasks: list[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def insert(self, data: TaskInput) -> Task:
        """Assign the next id to a new task, append it, and return a copy."""
        with self._lock:
            task = Task(id=self._next_id, **data.model_dump())
            self._next_id += 1
            self._tasks.append(task)
            return task.model_copy()

    def list_all(self) -> list[Task]:
        """Return a snapshot of all tasks in creation order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def find_by_id(self, task_id: int) -> Task | None:
        """Get a task by its ID, or None if not found."""
        with self._lock:
            task = self._find(task_id)
            return task.model_copy() if task is not None else None

    def update_by_id(self, task_id: int, data: TaskInput) -> Task | None:
        """Overwrite a task's fields in place. Returns None if not found."""
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None

            task.title = data.title
            task.description = data.description
            task.status = data.status
            return task.model_copy()

    def delete_by_id(self, task_id: int) -> bool:
        """Delete a task. Returns True if deleted, False if not found."""
        with self._lock:
            for index, task in enumerate(self._tasks):
                if task.id == task_id:
                    del self._tasks[index]
                    return True
            return False

    def clear(self) -> None:
        """Drop all tasks. The id counter keeps counting."""
        with self._lock:
            logger.debug("Clearing %d tasks", len(self._tasks))
            self._tasks.clear()

    def _find(self, task_id: int) -> Task | None:
        # Caller must hold the lock.
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None
