# src/terminal_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..core.ports import LineReader
from ..core.state import AppState
from ..tasks.task_errors import (
    EmptyFieldError,
    InvalidDateFormatError,
    TaskAlreadyCompletedError,
    TaskNotFoundError,
)
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, LineReader], str]

OK = "[OK]"
ERROR = "[ERROR]"
INFO = "[INFO]"

FAREWELL = "Exiting. Goodbye!"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandReply:
    text: str
    ends_session: bool = False


class CommandRegistry:
    """Registry of the task commands (add-task, list-tasks, ..., exit)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._terminal: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        ends_session: bool = False,
    ) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        if ends_session:
            self._terminal.add(key)

    def names(self) -> list[str]:
        return list(self._handlers)

    def handle(self, state: AppState, line: str, reader: LineReader) -> CommandReply:
        """
        Handle one command line such as "add-task".

        Follow-up fields are read from `reader`; EOFError from it propagates.
        """
        name = line.strip().lower()

        handler = self._handlers.get(name)
        if not handler:
            logger.debug("Unknown command %r", name)
            return CommandReply(f"{ERROR} Unknown command. Type 'help' to see available commands.")

        logger.debug("Dispatching command %s", name)
        return CommandReply(handler(state, reader), ends_session=name in self._terminal)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f" {name:<14} - {help_text}")
        return "\n".join(lines)

    def help_handler(self) -> CommandHandler:
        """Handler that renders this registry's own help, not the default one."""

        def _help(state: AppState, reader: LineReader) -> str:
            return self.build_help()

        return _help


registry = CommandRegistry()


def format_task(task: Task) -> str:
    return f"[{task.id}] {task.title} | Due: {task.due_date} | Status: {task.status.label}"


def _format_tasks(tasks: Iterable[Task]) -> str:
    return "\n".join(format_task(t) for t in tasks)


def cmd_add(state: AppState, reader: LineReader) -> str:
    title = reader.read_line("Enter task title: ").strip()
    due_date = reader.read_line("Enter due date (YYYY-MM-DD): ").strip()

    try:
        task = state.task_store.add_task(title, due_date)
    except EmptyFieldError:
        return f"{ERROR} Title and due date cannot be empty."
    except InvalidDateFormatError:
        return f"{ERROR} Invalid date format. Use YYYY-MM-DD."

    return f'{OK} Task "{task.title}" added with id {task.id}.'


def cmd_list(state: AppState, reader: LineReader) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return f"{INFO} No tasks available."
    return _format_tasks(tasks)


def cmd_complete(state: AppState, reader: LineReader) -> str:
    identifier = reader.read_line("Enter task ID or title to complete: ").strip()

    try:
        task = state.task_store.complete_task(identifier)
    except TaskNotFoundError:
        return f"{ERROR} Task not found."
    except TaskAlreadyCompletedError:
        return f"{INFO} Task already completed."

    return f'{OK} Task "{task.title}" marked completed.'


def cmd_update(state: AppState, reader: LineReader) -> str:
    """
    Ask for the task first; only ask for new values if it exists.
    Empty answers keep the current values.
    """
    identifier = reader.read_line("Enter task ID or title to update: ").strip()

    try:
        task = state.task_store.find_task(identifier)
    except TaskNotFoundError:
        return f"{ERROR} Task not found."

    new_title = reader.read_line("Enter new title (leave empty to keep current): ").strip()
    new_due_date = reader.read_line(
        "Enter new due date (YYYY-MM-DD, leave empty to keep current): "
    ).strip()

    # Re-resolve by id: the title may be ambiguous, the id never is.
    try:
        state.task_store.update_task(
            str(task.id), new_title=new_title, new_due_date=new_due_date
        )
    except InvalidDateFormatError:
        return f"{ERROR} Invalid date format. Use YYYY-MM-DD. Task not changed."

    return f"{OK} Task updated."


def cmd_delete(state: AppState, reader: LineReader) -> str:
    identifier = reader.read_line("Enter task ID or title to delete: ").strip()

    try:
        removed = state.task_store.delete_task(identifier)
    except TaskNotFoundError:
        return f"{ERROR} Task not found."

    return f'{OK} Task "{removed.title}" deleted.'


def cmd_search(state: AppState, reader: LineReader) -> str:
    keyword = reader.read_line("Enter title or due date to search: ").strip()

    results = state.task_store.search_tasks(keyword)
    if not results:
        return f"{INFO} No matching tasks found."
    return _format_tasks(results)


def cmd_exit(state: AppState, reader: LineReader) -> str:
    return FAREWELL


registry.register("add-task", cmd_add, help_text="Add a new task")
registry.register("list-tasks", cmd_list, help_text="Show all tasks")
registry.register("complete-task", cmd_complete, help_text="Mark task as completed")
registry.register("update-task", cmd_update, help_text="Update title or due date of a task")
registry.register("delete-task", cmd_delete, help_text="Delete a task")
registry.register("search-tasks", cmd_search, help_text="Search tasks by title or due date")
registry.register("help", registry.help_handler(), help_text="Show this help menu")
registry.register("exit", cmd_exit, help_text="Exit the application", ends_session=True)
