# tests/test_commands.py

from __future__ import annotations

from terminal_tasks.cli.commands import CommandRegistry, format_task, registry
from terminal_tasks.tasks.task_models import Task

from .fakes import ScriptedIO


def test_command_registry_routes_and_marks_terminal(state) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def h_a(state, reader):
        called["a"] += 1
        return f"a:{reader.read_line('? ')}"

    def h_stop(state, reader):
        return "bye"

    reg.register("Cmd-A", h_a, "a")
    reg.register("stop", h_stop, "stop", ends_session=True)

    io = ScriptedIO.of(["x"])
    reply = reg.handle(state, "  CMD-a ", io)
    assert reply.text == "a:x"
    assert reply.ends_session is False
    assert io.prompts == ["? "]
    assert called["a"] == 1

    assert reg.handle(state, "STOP", io).ends_session is True


def test_command_registry_unknown_and_blank(state) -> None:
    reg = CommandRegistry()
    io = ScriptedIO()

    reply = reg.handle(state, "nope", io)
    assert "Unknown command" in reply.text
    assert reply.text.startswith("[ERROR]")
    assert not reply.ends_session

    assert "Unknown command" in reg.handle(state, "", io).text


def test_default_registry_lists_commands_in_order() -> None:
    assert registry.names() == [
        "add-task",
        "list-tasks",
        "complete-task",
        "update-task",
        "delete-task",
        "search-tasks",
        "help",
        "exit",
    ]

    help_lines = registry.build_help().splitlines()
    assert help_lines[0] == "Available commands:"
    assert help_lines[1] == " add-task       - Add a new task"
    assert help_lines[-1] == " exit           - Exit the application"


def test_format_task_template() -> None:
    task = Task(id=7, title="Pay rent", due_date="2024-03-01")
    assert format_task(task) == "[7] Pay rent | Due: 2024-03-01 | Status: Pending"

    task.completed = True
    assert format_task(task) == "[7] Pay rent | Due: 2024-03-01 | Status: Completed"
