# src/taskline/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class TaskList:
    """
    Ordered, mutable task container.

    Insertion order is the visible and persisted order. Every index taken by
    this class is 1-based; callers validate the range first, so an
    out-of-range index here raises IndexError.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def _offset(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise IndexError(f"task index {index} out of range 1..{len(self._tasks)}")
        return index - 1

    # ---- mutations ----

    def add(self, task: Task) -> Task:
        self._tasks.append(task)
        return task

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._offset(index))

    def update_status(self, index: int, done: bool) -> Task:
        task = self._tasks[self._offset(index)]
        task.is_done = done
        return task

    # ---- queries ----

    def get(self, index: int) -> Task:
        return self._tasks[self._offset(index)]

    def length(self) -> int:
        return len(self._tasks)

    def find_by_text(self, substring: str) -> list[Task]:
        """Case-sensitive substring search over descriptions, in list order."""
        return [t for t in self._tasks if substring in t.description]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
