# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskline.core.state import AppState
from taskline.tasks.task_list import TaskList
from taskline.tasks.task_store import TaskStorage

from .fakes import FakeTaskRepo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    A SimpleNamespace rather than the real config, so tests never depend on
    the caller's environment or .env file.
    """
    return SimpleNamespace(
        app_name="taskline-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.txt",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState backed by the real file store under tmp_path."""
    return AppState(settings=settings, storage=TaskStorage(settings.tasks_path), tasks=TaskList())


@pytest.fixture()
def fake_state(settings: SimpleNamespace) -> AppState:
    """AppState backed by an in-memory repo that records saves."""
    return AppState(settings=settings, storage=FakeTaskRepo(), tasks=TaskList())
