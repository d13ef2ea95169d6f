# src/taskline/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the session loop.

The loop depends on a Protocol instead of the concrete file store,
so tests can swap in an in-memory fake.
"""

from typing import Protocol

from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    """Whole-list persistence: load once at startup, save after every line."""

    def load(self) -> TaskList: ...
    def save(self, tasks: TaskList) -> None: ...
