"""API request/response schemas for the task management system."""

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .models.task import Task


# Task-related schemas
class CreateTaskRequest(BaseModel):
    """Schema for creating a new task."""
    name: str = Field(..., description="Task name")
    status: Optional[str] = Field(None, description="Task status, NOT_COMPLETED when omitted")
    due_date: Optional[date] = Field(None, description="Task due date, today when omitted")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True


class UpdateTaskRequest(BaseModel):
    """Schema for updating an existing task."""
    name: Optional[str] = Field(None, description="Task name")
    status: Optional[str] = Field(None, description="Task status")
    due_date: Optional[date] = Field(None, description="Task due date")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True


class TaskResponse(BaseModel):
    """Schema for task API responses."""
    id: str = Field(..., description="Unique task identifier")
    name: str = Field(..., description="Task name")
    status: str = Field(..., description="Task status")
    due_date: date = Field(..., description="Task due date")

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        """Build a response from a task aggregate."""
        return cls(
            id=task.task_id.value,
            name=task.name.value,
            status=task.status.value,
            due_date=task.due_date.value,
        )


# Error schema
class ErrorMessageResponse(BaseModel):
    """Schema for error responses."""
    status: str = Field(..., description="HTTP status code as text")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[List[Dict[str, Any]]] = Field(None, description="Validation error details")


# Health check schema
class HealthResponse(BaseModel):
    """Schema for health check responses."""
    status: str = Field(default="healthy", description="Service health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), description="Health check timestamp")
    version: str = Field(default="1.0.0", description="Application version")
    task_count: int = Field(default=0, description="Number of stored tasks")
