# src/terminal_tasks/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import ERROR, FAREWELL, CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import LineIO, LineWriter
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


class ConsoleIO:
    """LineReader/LineWriter over stdin/stdout."""

    def read_line(self, prompt: str) -> str:
        # input() raises EOFError when stdin is closed.
        return input(prompt)

    def emit(self, text: str) -> None:
        print(text, flush=True)


def _emit_reply(writer: LineWriter, text: str) -> None:
    # Only "\n" separates lines; titles may contain other line-break characters.
    for line in text.split("\n"):
        writer.emit(line)


def print_banner(state: AppState, writer: LineWriter, registry: CommandRegistry) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "Terminal Task Manager"))
    writer.emit(f"Welcome to {app_name}")
    _emit_reply(writer, registry.build_help())


def run_console_loop(
    state: AppState,
    io: LineIO | None = None,
    *,
    registry: CommandRegistry | None = None,
) -> None:
    """
    Read-dispatch loop. Returns on `exit`, on end of input or on Ctrl+C.

    `io` defaults to the real console.
    End of input is handled like `exit`, including in the middle of a command.
    """
    console: LineIO = io if io is not None else ConsoleIO()
    registry = registry or command_registry

    logger.info("Console session started.")
    if getattr(getattr(state, "settings", None), "show_banner", True):
        print_banner(state, console, registry)

    while True:
        try:
            line = console.read_line(PROMPT).strip()
            reply = registry.handle(state, line, console)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            console.emit(FAREWELL)
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.emit("")
            console.emit(FAREWELL)
            break
        except Exception:
            logger.exception("Command handler crashed.")
            console.emit(f"{ERROR} Internal error while handling a command.")
            continue

        _emit_reply(console, reply.text)
        if reply.ends_session:
            logger.info("Console exit command received.")
            break

    logger.info("Console session finished.")
