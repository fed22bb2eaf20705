"""Run the Task API with uvicorn."""

import uvicorn

from .deps import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "task_api.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
