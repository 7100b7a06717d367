# src/terminal_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Commands depend on Protocols instead of concrete console / store classes.
This keeps the console swappable and makes sessions scriptable in tests.
"""

from typing import Protocol

from ..tasks.task_models import Task


class LineReader(Protocol):
    """Blocking line input. Raises EOFError once the stream is closed."""
    def read_line(self, prompt: str) -> str: ...


class LineWriter(Protocol):
    def emit(self, text: str) -> None: ...


class LineIO(LineReader, LineWriter, Protocol):
    """Both halves of a line-oriented terminal."""


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...
    def add_task(self, title: str, due_date: str) -> Task: ...
    def find_task(self, identifier: str) -> Task: ...
    def list_tasks(self) -> list[Task]: ...
    def complete_task(self, identifier: str) -> Task: ...
    def update_task(
            self,
            identifier: str,
            *,
            new_title: str | None = None,
            new_due_date: str | None = None,
    ) -> Task: ...
    def delete_task(self, identifier: str) -> Task: ...
    def search_tasks(self, keyword: str) -> list[Task]: ...
