# tasks/task_errors.py

from __future__ import annotations

from .task_models import Task


class TaskError(Exception):
    """Base class for everything TaskStore raises."""


class TaskValidationError(TaskError, ValueError):
    pass


class EmptyFieldError(TaskValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"{field} cannot be empty")
        self.field = field


class InvalidDateFormatError(TaskValidationError):
    def __init__(self, value: str) -> None:
        super().__init__(f"invalid date format: {value!r} (expected YYYY-MM-DD)")
        self.value = value


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, identifier: str) -> None:
        super().__init__(f"task not found: {identifier!r}")
        self.identifier = identifier


class TaskAlreadyCompletedError(TaskError):
    """
    Informational: the task was already completed, nothing changed.

    The task is attached so callers can still report on it.
    """

    def __init__(self, task: Task) -> None:
        super().__init__(f"task {task.id} is already completed")
        self.task = task
