# src/taskline/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.errors import DateParseFailure, StorageIOFailure
from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskKind, ToDo, parse_date

logger = logging.getLogger(__name__)

DELIMITER = " | "


def encode_task(task: Task) -> str:
    fields = [task.kind.value, "1" if task.is_done else "0", task.description]
    if isinstance(task, (Deadline, Event)):
        fields.append(task.date.isoformat())
    return DELIMITER.join(fields)


def decode_task(line: str) -> Task:
    """
    Parse one storage line.

    Dated tasks take their date from the last field, so a description that
    happens to contain the delimiter still decodes. Raises ValueError on any
    malformed line.
    """
    parts = line.split(DELIMITER, 2)
    if len(parts) != 3:
        raise ValueError("expected at least 3 fields")
    tag, flag, rest = parts

    kind = TaskKind.from_tag(tag)
    if flag.strip() not in ("0", "1"):
        raise ValueError(f"bad done flag: {flag!r}")
    is_done = flag.strip() == "1"

    if kind is TaskKind.TODO:
        return ToDo(rest, is_done=is_done)

    description, sep, raw_date = rest.rpartition(DELIMITER)
    if not sep:
        raise ValueError("missing date field")
    try:
        when = parse_date(raw_date)
    except DateParseFailure as e:
        raise ValueError(e.message) from None

    if kind is TaskKind.DEADLINE:
        return Deadline(description, when, is_done=is_done)
    return Event(description, when, is_done=is_done)


class TaskStorage:
    """
    Flat text file store: one task per line.

    - load(): a missing file is an empty list; malformed lines are skipped
      with a warning and recorded in `skipped_lines`.
    - save(): rewrites the whole file (tmp file + os.replace).
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)
        self.skipped_lines: list[int] = []

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        self.skipped_lines = []
        if not self._path.exists():
            logger.info("Task file %s not found, starting with an empty list.", self._path)
            return TaskList()

        try:
            with open(self._path, "rb") as f:
                raw = f.read()
        except OSError as e:
            logger.exception("Failed to read task file %s", self._path)
            raise StorageIOFailure(self._path, str(e)) from e

        tasks = TaskList()
        # Records end with "\n" only; other line-break characters belong to descriptions.
        for lineno, chunk in enumerate(raw.split(b"\n"), start=1):
            try:
                line = chunk.decode("utf-8")
                if not line.strip():
                    continue
                tasks.add(decode_task(line))
            except ValueError as e:
                self.skipped_lines.append(lineno)
                logger.warning("Skipping malformed line %d in %s: %s", lineno, self._path, e)

        logger.info(
            "Loaded %d tasks from %s (skipped=%d)",
            len(tasks),
            self._path,
            len(self.skipped_lines),
        )
        return tasks

    def save(self, tasks: TaskList) -> None:
        data = "".join(encode_task(t) + "\n" for t in tasks).encode("utf-8")
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "wb") as f:
                f.write(data)
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            raise StorageIOFailure(self._path, str(e)) from e
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
