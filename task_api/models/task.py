"""Task aggregate for the task management system."""

from datetime import date
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .value_objects import DueDate, TaskId, TaskName, TaskStatus


class Task(BaseModel):
    """Task aggregate root.

    A task is immutable; ``update`` returns a new instance with the same id.
    """

    task_id: TaskId = Field(..., description="Unique task identifier")
    name: TaskName = Field(..., description="Task name")
    status: TaskStatus = Field(..., description="Task status")
    due_date: DueDate = Field(..., description="Task due date")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @classmethod
    def create(
        cls,
        name: str,
        status: Optional[str] = None,
        due_date: Optional[date] = None,
        today: Optional[date] = None,
    ) -> "Task":
        """Create a new task from user input.

        Args:
            name: Task name
            status: Status member name, defaults to NOT_COMPLETED
            due_date: Due date, defaults to today
            today: Current date used for the due date check

        Returns:
            Newly created task with a generated id

        Raises:
            InvalidRequestError: If any field is invalid
        """
        task_id = TaskId.generate()
        task_name = TaskName.value_of(name)
        task_status = TaskStatus.default() if status is None else TaskStatus.value_of(status)
        task_due_date = DueDate.value_of(due_date, today=today)

        return cls(
            task_id=task_id,
            name=task_name,
            status=task_status,
            due_date=task_due_date,
        )

    @classmethod
    def reconstruct(
        cls,
        task_id: TaskId,
        name: TaskName,
        status: TaskStatus,
        due_date: DueDate,
    ) -> "Task":
        """Rebuild a task from stored components."""
        return cls(task_id=task_id, name=name, status=status, due_date=due_date)

    def update(
        self,
        name: Optional[str] = None,
        status: Optional[str] = None,
        due_date: Optional[date] = None,
        today: Optional[date] = None,
    ) -> "Task":
        """Return a copy of this task with the given fields replaced.

        Supplied fields are validated exactly as on creation; omitted fields
        keep their current value.

        Raises:
            InvalidRequestError: If a supplied field is invalid
        """
        changes: Dict[str, Any] = {}

        if name is not None:
            changes["name"] = TaskName.value_of(name)

        if status is not None:
            changes["status"] = TaskStatus.value_of(status)

        if due_date is not None:
            changes["due_date"] = DueDate.value_of(due_date, today=today)

        if not changes:
            return self

        return self.model_copy(update=changes)
