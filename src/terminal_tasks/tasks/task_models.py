# tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

# Shape check only: "2024-13-45" is accepted. ASCII digits only.
DUE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


def is_valid_due_date(raw: str) -> bool:
    return bool(DUE_DATE_PATTERN.fullmatch(raw))


class TaskStatus(StrEnum):
    """Display status derived from the `completed` flag."""

    PENDING = "pending"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_flag(cls, completed: bool) -> TaskStatus:
        return cls.COMPLETED if completed else cls.PENDING


@dataclass(slots=True)
class Task:
    id: int
    title: str
    due_date: str
    completed: bool = False

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.from_flag(self.completed)
