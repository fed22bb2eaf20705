"""Domain exceptions for the task management system."""


class InvalidRequestError(ValueError):
    """Raised when input violates a task domain invariant."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskNotFoundError(LookupError):
    """Raised when a task id does not resolve to a stored task."""

    def __init__(self, message: str = "The task is not found."):
        super().__init__(message)
        self.message = message
