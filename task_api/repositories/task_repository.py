"""Task repository port and in-memory adapter."""

import logging
from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, List, Optional

from ..models.task import Task
from ..models.value_objects import TaskId

logger = logging.getLogger(__name__)


class TaskRepository(ABC):
    """Storage port for task aggregates.

    Implementations make each call atomic on its own. A missing task is a
    normal outcome, never an error.
    """

    @abstractmethod
    def save(self, task: Task) -> None:
        """Insert the task, or replace the stored task with the same id."""

    @abstractmethod
    def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Return the task with the given id, or None."""

    @abstractmethod
    def find_all(self) -> List[Task]:
        """Return every stored task."""

    @abstractmethod
    def remove(self, task_id: TaskId) -> None:
        """Delete the task with the given id if it exists."""


class InMemoryTaskRepository(TaskRepository):
    """Task repository backed by a dict keyed by task id.

    ``find_all`` returns tasks in first-insertion order; replacing a task keeps
    its position.
    """

    def __init__(self):
        """Initialize the repository."""
        self._tasks: Dict[str, Task] = {}
        self._lock = Lock()
        logger.info("Task repository initialized with in-memory storage")

    def save(self, task: Task) -> None:
        with self._lock:
            key = task.task_id.value
            existed = key in self._tasks
            self._tasks[key] = task

            if existed:
                logger.debug(f"Replaced task {key}")
            else:
                logger.debug(f"Inserted task {key}")

    def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id.value)
            if task is None:
                logger.debug(f"Task {task_id} not found")
            return task

    def find_all(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())

    def remove(self, task_id: TaskId) -> None:
        with self._lock:
            if self._tasks.pop(task_id.value, None) is None:
                logger.debug(f"Task {task_id} not found for removal")
            else:
                logger.debug(f"Removed task {task_id}")

    def count(self) -> int:
        """Get the number of stored tasks."""
        with self._lock:
            return len(self._tasks)
