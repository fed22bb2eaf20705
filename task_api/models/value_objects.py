"""Value objects that make up a task.

Instances are immutable and always valid. Use the ``value_of`` factories for
user-supplied input and ``reconstruct`` when rehydrating stored data.
"""

import re
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from .exceptions import InvalidRequestError

_UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def _as_date(value: date) -> date:
    """Drop the time part of a datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


class TaskId(BaseModel):
    """Task identity in lower-case UUID text form."""

    value: str = Field(
        ...,
        pattern=r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
        description="Canonical task identifier",
    )

    class Config:
        """Pydantic configuration."""
        frozen = True

    @classmethod
    def generate(cls) -> "TaskId":
        """Generate a new random task id."""
        return cls(value=str(uuid4()))

    @classmethod
    def value_of(cls, value: str) -> "TaskId":
        """Parse a task id from its textual form.

        Args:
            value: UUID text, any letter case

        Returns:
            Task id holding the lower-case form

        Raises:
            InvalidRequestError: If the value is not UUID shaped
        """
        if not isinstance(value, str) or not _UUID_PATTERN.fullmatch(value):
            raise InvalidRequestError("Task id must be UUIDv4 format.")
        return cls(value=value.lower())

    def __str__(self) -> str:
        return self.value


class TaskName(BaseModel):
    """Display name of a task."""

    value: str = Field(..., min_length=1, description="Task name")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @field_validator("value")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Task name must not be blank.")
        return value

    @classmethod
    def value_of(cls, value: str) -> "TaskName":
        """Create a task name, rejecting empty or blank input.

        The name is kept exactly as given.
        """
        if not isinstance(value, str) or not value.strip():
            raise InvalidRequestError("Task name must not be blank.")
        return cls(value=value)

    def __str__(self) -> str:
        return self.value


class TaskStatus(str, Enum):
    """Task status enumeration."""
    NOT_COMPLETED = "NOT_COMPLETED"
    DONE = "DONE"

    @classmethod
    def value_of(cls, value: str) -> "TaskStatus":
        """Look up a status by its exact member name."""
        if not isinstance(value, str) or value not in cls.__members__:
            raise InvalidRequestError(f"TaskStatus({value}) is not supported.")
        return cls[value]

    @classmethod
    def default(cls) -> "TaskStatus":
        """Status given to newly created tasks."""
        return cls.NOT_COMPLETED

    def __str__(self) -> str:
        return self.value


class DueDate(BaseModel):
    """Task due date.

    A freshly supplied due date must not precede the day it is set. When no
    date is supplied the due date is today.
    """

    value: date = Field(..., description="Due date")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @classmethod
    def value_of(cls, value: Optional[date] = None, today: Optional[date] = None) -> "DueDate":
        """Create a due date from user input.

        Args:
            value: Requested due date, or None for today
            today: Current date; read from the system clock when omitted

        Returns:
            Due date holding the requested (or default) value

        Raises:
            InvalidRequestError: If the value is before today
        """
        today = _as_date(today or date.today())
        if value is None:
            return cls.create_default(today)

        value = _as_date(value)

        if not value > today - timedelta(days=1):
            raise InvalidRequestError(f"DueDate({value.isoformat()}) must be after today.")
        return cls(value=value)

    @classmethod
    def create_default(cls, today: Optional[date] = None) -> "DueDate":
        """Create a due date set to today."""
        return cls(value=_as_date(today or date.today()))

    @classmethod
    def reconstruct(cls, value: date) -> "DueDate":
        """Wrap a stored due date without the freshness check."""
        return cls(value=_as_date(value))

    def __str__(self) -> str:
        return self.value.isoformat()
