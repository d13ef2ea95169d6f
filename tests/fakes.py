# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field

from taskline.core.errors import StorageIOFailure
from taskline.tasks.task_list import TaskList
from taskline.tasks.task_store import encode_task


@dataclass(slots=True)
class FakeTaskRepo:
    """
    In-memory TaskRepo.

    - `saved` records each save as the list of encoded lines
    - `fail_saves=True` makes save() raise StorageIOFailure
    """

    initial: TaskList = field(default_factory=TaskList)
    saved: list[list[str]] = field(default_factory=list)
    fail_saves: bool = False

    def load(self) -> TaskList:
        return TaskList(self.initial)

    def save(self, tasks: TaskList) -> None:
        if self.fail_saves:
            raise StorageIOFailure("fake.txt", "disk full")
        self.saved.append([encode_task(t) for t in tasks])


class ScriptedInput:
    """input() replacement that replays lines, then raises EOFError."""

    def __init__(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)
