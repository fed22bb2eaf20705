"""FastAPI main application with app factory and route configuration."""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncGenerator, Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .deps import get_settings
from .routes import tasks
from .schemas import ErrorMessageResponse, HealthResponse
from .services.task_service import get_task_service, initialize_task_service
from .utils.logging import (
    configure_request_logging,
    log_shutdown_info,
    log_startup_info,
    setup_logging,
)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def _error_response(status_code: int, message: str, details=None) -> JSONResponse:
    body = ErrorMessageResponse(status=str(status_code), message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    settings: Settings = app.state.settings

    try:
        setup_logging(settings)
        log_startup_info(settings)

        initialize_task_service(clock=app.state.clock)
        logger.info("Task service initialized")

        logger.info("Application startup completed successfully")

    except Exception as e:
        logger.error(f"Error during application startup: {str(e)}")
        raise

    yield

    log_shutdown_info(settings)


def create_app(
    settings: Optional[Settings] = None,
    clock: Optional[Callable[[], date]] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the cached global settings
        clock: Current-date source for due date checks

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Task management API with validated task names, statuses and due dates",
        version=VERSION,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.clock = clock

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(configure_request_logging())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions with proper logging."""
        logger.warning(
            f"HTTP {exc.status_code}: {exc.detail} for {request.method} {request.url}"
        )
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle request validation errors with detailed information."""
        logger.warning(
            f"Validation error for {request.method} {request.url}: {exc.errors()}"
        )
        details = [
            {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
            for error in exc.errors()
        ]
        return _error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", details
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(
            f"Unexpected error for {request.method} {request.url}: {str(exc)}",
            exc_info=True,
        )
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
        )

    @app.get("/healthz", tags=["health"], response_model=HealthResponse)
    async def health_check():
        """Health check endpoint for monitoring and load balancers."""
        task_service = get_task_service()

        if task_service is None:
            return HealthResponse(status="degraded", version=VERSION)

        return HealthResponse(
            status="healthy",
            version=VERSION,
            task_count=len(task_service.list_tasks()),
        )

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": VERSION,
            "docs_url": "/docs",
            "health_check": "/healthz",
            "endpoints": {
                "list_tasks": "GET /tasks",
                "create_task": "POST /task",
                "get_task": "GET /task/{task_id}",
                "update_task": "PUT /task/{task_id}",
                "delete_task": "DELETE /task/{task_id}",
            },
        }

    app.include_router(tasks.router)

    logger.info("FastAPI application created and configured")

    return app


# Create the app instance
app = create_app()
