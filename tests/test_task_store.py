# tests/test_task_store.py

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from taskline.core.errors import StorageIOFailure
from taskline.tasks.task_list import TaskList
from taskline.tasks.task_models import Deadline, Event, ToDo
from taskline.tasks.task_store import TaskStorage, decode_task, encode_task


def _mixed() -> TaskList:
    return TaskList(
        [
            ToDo("buy milk"),
            Deadline("submit report", date(2024, 1, 15), is_done=True),
            Event("concert | front row", date(2024, 3, 2)),
            ToDo("call  mum "),
            ToDo("form\x0cfeed\x0bpage\x1c\x1d\x1e\x85 \u2028\u2029 end"),
            Deadline("x\ry", date(2024, 1, 15)),
            Event("trailing cr\r", date(2024, 1, 16)),
        ]
    )


def test_line_format() -> None:
    assert encode_task(ToDo("buy milk")) == "T | 0 | buy milk"
    assert encode_task(Deadline("submit report", date(2024, 1, 15), is_done=True)) == (
        "D | 1 | submit report | 2024-01-15"
    )
    assert decode_task("E | 0 | party | 2024-03-02") == Event("party", date(2024, 3, 2))


def test_save_load_round_trip(tmp_path: Path) -> None:
    storage = TaskStorage(tmp_path / "nested" / "tasks.txt")
    original = _mixed()

    storage.save(original)
    loaded = storage.load()
    assert loaded == original
    assert storage.skipped_lines == []

    storage.save(loaded)
    assert storage.load() == original


def test_save_rewrites_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    storage = TaskStorage(path)
    storage.save(_mixed())
    storage.save(TaskList([ToDo("only one")]))

    assert path.read_text(encoding="utf-8") == "T | 0 | only one\n"
    assert not path.with_suffix(".txt.tmp").exists()


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    assert len(TaskStorage(tmp_path / "absent.txt").load()) == 0


def test_malformed_lines_are_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(
        "\n".join(
            [
                "T | 0 | buy milk",
                "garbage",
                "X | 0 | unknown tag",
                "T | maybe | bad flag",
                "D | 0 | no date",
                "E | 1 | bad date | 2024-13-01",
                "T | 0 | ",
                "",
                "D | 1 | submit report | 2024-01-15",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    storage = TaskStorage(path)

    with caplog.at_level(logging.WARNING, logger="taskline.tasks.task_store"):
        tasks = storage.load()

    assert [str(t) for t in tasks] == [
        "[T][ ] buy milk",
        "[D][X] submit report (by: Jan 15 2024)",
    ]
    assert storage.skipped_lines == [2, 3, 4, 5, 6, 7]
    assert sum("Skipping malformed line" in r.message for r in caplog.records) == 6


def test_undecodable_line_is_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | buy milk\nT | 0 | caf\xe9\nT | 0 | ok\n")
    storage = TaskStorage(path)

    with caplog.at_level(logging.WARNING, logger="taskline.tasks.task_store"):
        tasks = storage.load()

    assert [t.description for t in tasks] == ["buy milk", "ok"]
    assert storage.skipped_lines == [2]
    assert any("Skipping malformed line 2" in r.message for r in caplog.records)


def test_unreadable_path_raises_storage_failure(tmp_path: Path) -> None:
    with pytest.raises(StorageIOFailure) as exc:
        TaskStorage(tmp_path).load()
    assert exc.value.path == tmp_path


def test_save_failure_is_reported(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    storage = TaskStorage(blocker / "tasks.txt")

    with pytest.raises(StorageIOFailure) as exc:
        storage.save(_mixed())
    assert exc.value.path == blocker / "tasks.txt"
