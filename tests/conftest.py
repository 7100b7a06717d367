# tests/conftest.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from terminal_tasks.core.state import AppState
from terminal_tasks.tasks.task_store import TaskStore


@pytest.fixture()
def settings() -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Test Tasks",
        log_level="WARNING",
        log_file=None,
        # Banner off by default so session output only holds command replies.
        show_banner=False,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
