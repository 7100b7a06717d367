# tasks/task_store.py

from __future__ import annotations

import logging

from .task_errors import (
    EmptyFieldError,
    InvalidDateFormatError,
    TaskAlreadyCompletedError,
    TaskNotFoundError,
)
from .task_models import Task, is_valid_due_date

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Owns the task list and the id counter; nothing is shared between instances.
    - ids start at 1 and are never reused (the counter only moves forward)
    - insertion order is the listing order
    - lookups by identifier are exact: id text first, then case-insensitive title
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        logger.debug("TaskStore ready")

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _index_of(self, identifier: str) -> int:
        # Id match wins over title match even if a title is numeric text.
        for i, task in enumerate(self._tasks):
            if str(task.id) == identifier:
                return i

        wanted = identifier.casefold()
        for i, task in enumerate(self._tasks):
            if task.title.casefold() == wanted:
                return i

        raise TaskNotFoundError(identifier)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, title: str, due_date: str) -> Task:
        title = (title or "").strip()
        due_date = (due_date or "").strip()

        if not title:
            raise EmptyFieldError("title")
        if not due_date:
            raise EmptyFieldError("due date")
        if not is_valid_due_date(due_date):
            raise InvalidDateFormatError(due_date)

        task = Task(id=self._next_id, title=title, due_date=due_date)
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s due=%s total=%s", task.id, task.due_date, len(self._tasks))
        return task

    def find_task(self, identifier: str) -> Task:
        return self._tasks[self._index_of(identifier)]

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def complete_task(self, identifier: str) -> Task:
        task = self.find_task(identifier)
        if task.completed:
            raise TaskAlreadyCompletedError(task)

        task.completed = True
        logger.debug("Task completed id=%s", task.id)
        return task

    def update_task(
        self,
        identifier: str,
        *,
        new_title: str | None = None,
        new_due_date: str | None = None,
    ) -> Task:
        """
        Replace title and/or due date; blank or None means "keep current".

        Everything is validated before the task is touched, so an invalid
        date leaves the title unchanged as well.
        """
        task = self.find_task(identifier)

        title = (new_title or "").strip()
        due_date = (new_due_date or "").strip()

        if due_date and not is_valid_due_date(due_date):
            raise InvalidDateFormatError(due_date)

        if title:
            task.title = title
        if due_date:
            task.due_date = due_date

        logger.debug(
            "Task updated id=%s title_changed=%s due_changed=%s",
            task.id,
            bool(title),
            bool(due_date),
        )
        return task

    def delete_task(self, identifier: str) -> Task:
        removed = self._tasks.pop(self._index_of(identifier))
        logger.debug("Task deleted id=%s total=%s", removed.id, len(self._tasks))
        return removed

    def search_tasks(self, keyword: str) -> list[Task]:
        """
        Substring search: case-insensitive on title, literal on due date.

        An empty keyword matches every task.
        """
        needle = keyword.casefold()
        return [
            t for t in self._tasks if needle in t.title.casefold() or keyword in t.due_date
        ]
