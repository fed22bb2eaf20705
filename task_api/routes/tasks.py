"""Task management CRUD routes."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..deps import get_task_service
from ..models.exceptions import InvalidRequestError, TaskNotFoundError
from ..schemas import CreateTaskRequest, TaskResponse, UpdateTaskRequest
from ..services.task_service import TaskService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])


@router.get("/tasks", response_model=List[TaskResponse])
async def list_tasks(
    task_service: TaskService = Depends(get_task_service)
) -> List[TaskResponse]:
    """List all tasks.

    Args:
        task_service: Task service instance

    Returns:
        List of task responses
    """
    try:
        tasks = task_service.list_tasks()
        return [TaskResponse.from_task(task) for task in tasks]

    except Exception as e:
        logger.error(f"Error listing tasks: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error while listing tasks"
        )


@router.post("/task", response_model=TaskResponse)
async def create_task(
    task_data: CreateTaskRequest,
    task_service: TaskService = Depends(get_task_service)
) -> TaskResponse:
    """Create a new task.

    Args:
        task_data: Task creation data
        task_service: Task service instance

    Returns:
        Created task response

    Raises:
        HTTPException: If the task data is invalid
    """
    try:
        logger.info(f"Creating new task: {task_data.name}")

        task = task_service.create_task_from_schema(task_data)

        return TaskResponse.from_task(task)

    except InvalidRequestError as e:
        logger.error(f"Validation error creating task: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except Exception as e:
        logger.error(f"Unexpected error creating task: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error during task creation"
        )


@router.get("/task/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service)
) -> TaskResponse:
    """Get a specific task by ID.

    Raises:
        HTTPException: If the id is invalid or the task is not found
    """
    try:
        logger.debug(f"Getting task: {task_id}")

        task = task_service.get_task(task_id)

        return TaskResponse.from_task(task)

    except (InvalidRequestError, TaskNotFoundError) as e:
        logger.error(f"Error getting task {task_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except Exception as e:
        logger.error(f"Unexpected error getting task {task_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error while retrieving task"
        )


@router.put("/task/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    task_data: UpdateTaskRequest,
    task_service: TaskService = Depends(get_task_service)
) -> TaskResponse:
    """Update a task.

    Args:
        task_id: Task ID
        task_data: Task update data
        task_service: Task service instance

    Returns:
        Updated task response

    Raises:
        HTTPException: If the id or data is invalid or the task is not found
    """
    try:
        logger.info(f"Updating task: {task_id}")

        task = task_service.update_task(task_id, task_data)

        return TaskResponse.from_task(task)

    except (InvalidRequestError, TaskNotFoundError) as e:
        logger.error(f"Error updating task {task_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except Exception as e:
        logger.error(f"Unexpected error updating task {task_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error during task update"
        )


@router.delete("/task/{task_id}", status_code=status.HTTP_200_OK)
async def delete_task(
    task_id: str,
    task_service: TaskService = Depends(get_task_service)
) -> Response:
    """Delete a task. Deleting an unknown task succeeds."""
    try:
        logger.info(f"Deleting task: {task_id}")

        task_service.delete_task(task_id)

        return Response(status_code=status.HTTP_200_OK)

    except InvalidRequestError as e:
        logger.error(f"Error deleting task {task_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except Exception as e:
        logger.error(f"Unexpected error deleting task {task_id}: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error during task deletion"
        )
