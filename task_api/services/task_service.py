"""Task service for CRUD operations on top of the task repository."""

import logging
from datetime import date
from threading import Lock
from typing import Callable, List, Optional

from ..models.exceptions import TaskNotFoundError
from ..models.task import Task
from ..models.value_objects import TaskId
from ..repositories.task_repository import InMemoryTaskRepository, TaskRepository
from ..schemas import CreateTaskRequest, UpdateTaskRequest

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task CRUD operations."""

    def __init__(
        self,
        repository: TaskRepository,
        clock: Callable[[], date] = date.today,
    ):
        """Initialize the task service.

        Args:
            repository: Storage for task aggregates
            clock: Source of the current date for due date checks
        """
        self._repository = repository
        self._clock = clock
        self._lock = Lock()  # Serializes load-modify-save on updates
        logger.info(f"Task service initialized with {type(repository).__name__}")

    @property
    def repository(self) -> TaskRepository:
        return self._repository

    def create_task(
        self,
        name: str,
        status: Optional[str] = None,
        due_date: Optional[date] = None,
    ) -> Task:
        """Create and store a new task.

        Args:
            name: Task name
            status: Optional status member name
            due_date: Optional due date

        Returns:
            Created task

        Raises:
            InvalidRequestError: If any field is invalid
        """
        task = Task.create(name, status=status, due_date=due_date, today=self._clock())
        self._repository.save(task)

        logger.info(f"Created task {task.task_id}: {task.name}")
        return task

    def create_task_from_schema(self, task_data: CreateTaskRequest) -> Task:
        """Create a new task from schema."""
        return self.create_task(
            name=task_data.name,
            status=task_data.status,
            due_date=task_data.due_date,
        )

    def get_task(self, task_id: str) -> Task:
        """Get a task by its textual id.

        Raises:
            InvalidRequestError: If the id is malformed
            TaskNotFoundError: If no task has the id
        """
        task = self._repository.find_by_id(TaskId.value_of(task_id))
        if task is None:
            raise TaskNotFoundError()

        logger.debug(f"Retrieved task {task.task_id}: {task.name}")
        return task

    def list_tasks(self) -> List[Task]:
        """List all tasks."""
        tasks = self._repository.find_all()
        logger.debug(f"Listed {len(tasks)} tasks")
        return tasks

    def update_task(self, task_id: str, task_data: UpdateTaskRequest) -> Task:
        """Update the given fields of a task.

        Args:
            task_id: Task id text
            task_data: Fields to replace; None fields are left unchanged

        Returns:
            Updated task

        Raises:
            InvalidRequestError: If the id or a supplied field is invalid
            TaskNotFoundError: If no task has the id
        """
        parsed_id = TaskId.value_of(task_id)

        with self._lock:
            task = self._repository.find_by_id(parsed_id)
            if task is None:
                logger.warning(f"Task {parsed_id} not found for update")
                raise TaskNotFoundError()

            updated = task.update(
                name=task_data.name,
                status=task_data.status,
                due_date=task_data.due_date,
                today=self._clock(),
            )
            self._repository.save(updated)

        logger.info(f"Updated task {parsed_id}: {updated.name} [{updated.status}] due {updated.due_date}")
        return updated

    def delete_task(self, task_id: str) -> None:
        """Delete a task; deleting an unknown id does nothing.

        Raises:
            InvalidRequestError: If the id is malformed
        """
        parsed_id = TaskId.value_of(task_id)

        with self._lock:
            self._repository.remove(parsed_id)

        logger.info(f"Deleted task {parsed_id}")


# Global task service instance - will be initialized during app startup
_task_service: Optional[TaskService] = None


def get_task_service() -> Optional[TaskService]:
    """Get the global task service instance.

    Returns:
        Task service instance or None if not initialized
    """
    return _task_service


def initialize_task_service(
    repository: Optional[TaskRepository] = None,
    clock: Optional[Callable[[], date]] = None,
) -> TaskService:
    """Initialize the global task service instance.

    Args:
        repository: Task storage, a fresh in-memory repository when omitted
        clock: Current-date source, the system date when omitted

    Returns:
        Initialized task service
    """
    global _task_service
    _task_service = TaskService(
        repository if repository is not None else InMemoryTaskRepository(),
        clock=clock or date.today,
    )
    return _task_service
