# src/terminal_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them (app name, banner).
    settings: object

    task_store: TaskRepo
