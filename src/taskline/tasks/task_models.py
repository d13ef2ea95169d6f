# src/taskline/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import ClassVar

from ..core.errors import DateParseFailure

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Fixed English abbreviations; strftime("%b") follows the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the display tag ("[T]") and the storage tag ("T | ...").
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_tag(cls, raw: str) -> TaskKind:
        try:
            return cls(raw.strip().upper())
        except ValueError:
            raise ValueError(f"unknown task tag: {raw!r}") from None


def parse_date(raw: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date."""
    text = raw.strip()
    if not ISO_DATE_RE.match(text):
        raise DateParseFailure(text)
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise DateParseFailure(text) from None


def format_date(value: date) -> str:
    return f"{_MONTHS[value.month - 1]} {value.day:02d} {value.year:04d}"


@dataclass(slots=True)
class Task:
    description: str
    is_done: bool = field(default=False, kw_only=True)

    kind: ClassVar[TaskKind]

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def render(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description}"

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True)
class ToDo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    date: date

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def render(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description} (by: {format_date(self.date)})"


@dataclass(slots=True)
class Event(Task):
    date: date

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def render(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description} (at: {format_date(self.date)})"
