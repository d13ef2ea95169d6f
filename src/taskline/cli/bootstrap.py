# src/taskline/cli/bootstrap.py

"""
CLI bootstrap helpers.

Composition root: loads settings once, makes sure the local data directory
exists, builds the file store and loads the task list into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStorage

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). Raises
    StorageIOFailure when an existing task file cannot be read.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = TaskStorage(settings.tasks_path)
    tasks = storage.load()
    logger.info("TaskStorage ready path=%s total=%d", storage.path, len(tasks))

    return AppState(settings=settings, storage=storage, tasks=tasks)
