# src/terminal_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL
in the main thread until `exit` or end of input.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    logger.info("Starting %s...", getattr(settings, "app_name", "terminal-tasks"))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        # Tasks live only in memory; they are dropped with the process.
        logger.info("Bye. (%d tasks discarded)", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
