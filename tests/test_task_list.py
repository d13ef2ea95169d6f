# tests/test_task_list.py

from __future__ import annotations

from datetime import date

import pytest

from taskline.tasks.task_list import TaskList
from taskline.tasks.task_models import Deadline, Event, ToDo


def _sample() -> TaskList:
    return TaskList(
        [
            ToDo("buy milk"),
            Deadline("submit report", date(2024, 1, 15)),
            Event("team lunch", date(2024, 2, 1)),
            ToDo("return library book"),
        ]
    )


def test_add_returns_same_task_and_appends() -> None:
    tasks = TaskList()
    task = ToDo("a")
    assert tasks.add(task) is task
    tasks.add(ToDo("b"))
    assert [t.description for t in tasks] == ["a", "b"]
    assert tasks.length() == len(tasks) == 2


@pytest.mark.parametrize("index", [1, 2, 3, 4])
def test_remove_shrinks_by_one_and_shifts(index: int) -> None:
    tasks = _sample()
    before = [t.description for t in tasks]

    removed = tasks.remove(index)

    assert removed.description == before[index - 1]
    assert len(tasks) == len(before) - 1
    assert [t.description for t in tasks] == before[: index - 1] + before[index:]
    with pytest.raises(IndexError):
        tasks.get(len(before))


def test_update_status_is_idempotent() -> None:
    tasks = _sample()
    first = tasks.update_status(2, True)
    second = tasks.update_status(2, True)
    assert first is second
    assert second.is_done is True
    assert [t.is_done for t in tasks] == [False, True, False, False]

    assert tasks.update_status(2, False).is_done is False


def test_find_by_text() -> None:
    tasks = _sample()
    assert tasks.find_by_text("") == list(tasks)
    assert [t.description for t in tasks.find_by_text("re")] == [
        "submit report",
        "return library book",
    ]
    assert tasks.find_by_text("Milk") == []
    assert tasks.find_by_text("zzz") == []
    assert len(tasks) == 4


@pytest.mark.parametrize("index", [0, 5, -1])
def test_out_of_range_is_a_contract_violation(index: int) -> None:
    tasks = _sample()
    with pytest.raises(IndexError):
        tasks.remove(index)
    with pytest.raises(IndexError):
        tasks.update_status(index, True)
    assert len(tasks) == 4
