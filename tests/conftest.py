"""Shared test fixtures and configuration for the test suite."""

import logging
import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import Generator, Optional

import pytest
from fastapi.testclient import TestClient

# Add the parent directory to the path for imports
import sys

sys.path.append(str(Path(__file__).parent.parent))

from task_api.config import Settings
from task_api.main import create_app
from task_api.models.task import Task
from task_api.models.value_objects import DueDate, TaskId, TaskName, TaskStatus
from task_api.repositories.task_repository import InMemoryTaskRepository
from task_api.services.task_service import TaskService

TODAY = date(2024, 6, 15)


@pytest.fixture
def today() -> date:
    """Fixed current date used by the clock fixtures."""
    return TODAY


@pytest.fixture
def yesterday(today) -> date:
    return today - timedelta(days=1)


@pytest.fixture
def tomorrow(today) -> date:
    return today + timedelta(days=1)


@pytest.fixture
def test_settings() -> Generator[Settings, None, None]:
    """Create test settings with a temporary log directory."""
    with tempfile.TemporaryDirectory() as temp_dir:
        settings = Settings(
            app_name="Task API Test",
            log_level="DEBUG",
            log_dir=Path(temp_dir) / "logs",
            log_to_file=True,
            environment="test",
        )

        yield settings


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers replaced by setup_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield root_logger

    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def task_repository() -> InMemoryTaskRepository:
    """Create an empty in-memory task repository."""
    return InMemoryTaskRepository()


@pytest.fixture
def task_service(task_repository, today) -> TaskService:
    """Create a task service pinned to the fixed date."""
    return TaskService(task_repository, clock=lambda: today)


@pytest.fixture
def client(test_settings, today, restore_root_logging) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    app = create_app(test_settings, clock=lambda: today)
    with TestClient(app) as test_client:
        yield test_client


def make_task(
    task_id: Optional[str] = None,
    name: str = "タスク",
    status: str = TaskStatus.NOT_COMPLETED.value,
    due_date: Optional[date] = None,
) -> Task:
    """Build a task through the reconstruct path."""
    return Task.reconstruct(
        TaskId.value_of(task_id or TaskId.generate().value),
        TaskName.value_of(name),
        TaskStatus.value_of(status),
        DueDate.reconstruct(due_date or TODAY),
    )


@pytest.fixture
def sample_task() -> Task:
    """Create a sample task for testing."""
    return make_task(task_id="1234abcd-56ef-78ab-90cd-123456efabcd", name="タスク１")


@pytest.fixture
def task_factory():
    """Factory for reconstructed tasks."""
    return make_task
