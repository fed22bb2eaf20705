"""Dependency injection helpers for FastAPI."""

from functools import lru_cache

from fastapi import HTTPException, status

from .config import Settings, settings
from .services import task_service as task_service_module
from .services.task_service import TaskService


@lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return settings


def get_task_service() -> TaskService:
    """Get the task service initialized at startup."""
    service = task_service_module.get_task_service()
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Task service is not initialized",
        )
    return service
