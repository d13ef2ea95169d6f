# src/taskline/core/commands.py

"""
Typed commands.

One frozen dataclass per command, carrying only the fields that command
needs. build_command() is the single way a raw line becomes a Command.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..tasks.task_models import parse_date
from .errors import MissingArgument
from .parser import get_command, get_details, string_split
from .validator import CommandName, validate

DEADLINE_SEPARATOR = " /by "
EVENT_SEPARATOR = " /at "


@dataclass(frozen=True, slots=True)
class TodoCommand:
    description: str


@dataclass(frozen=True, slots=True)
class DeadlineCommand:
    description: str
    date: date


@dataclass(frozen=True, slots=True)
class EventCommand:
    description: str
    date: date


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class DoneCommand:
    index: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


@dataclass(frozen=True, slots=True)
class ClearCommand:
    pass


@dataclass(frozen=True, slots=True)
class HelloCommand:
    pass


@dataclass(frozen=True, slots=True)
class ByeCommand:
    pass


Command = (
    TodoCommand
    | DeadlineCommand
    | EventCommand
    | ListCommand
    | DoneCommand
    | DeleteCommand
    | FindCommand
    | ClearCommand
    | HelloCommand
    | ByeCommand
)


def _split_dated(name: CommandName, details: str, separator: str) -> tuple[str, date]:
    description, raw_date = string_split(details, separator)
    description = description.strip()
    if not description:
        raise MissingArgument(name)
    return description, parse_date(raw_date)


def build_command(line: str, task_count: int) -> Command:
    """
    Parse and validate one input line against the current task count.

    Raises a TasklineError subclass on the first failed check.
    """
    name, index = validate(get_command(line), get_details(line), task_count)
    details = get_details(line)

    if index is not None:
        return DoneCommand(index) if name is CommandName.DONE else DeleteCommand(index)
    if name is CommandName.TODO:
        return TodoCommand(details)
    if name is CommandName.DEADLINE:
        return DeadlineCommand(*_split_dated(name, details, DEADLINE_SEPARATOR))
    if name is CommandName.EVENT:
        return EventCommand(*_split_dated(name, details, EVENT_SEPARATOR))
    if name is CommandName.FIND:
        return FindCommand(details)
    if name is CommandName.LIST:
        return ListCommand()
    if name is CommandName.CLEAR:
        return ClearCommand()
    if name is CommandName.HELLO:
        return HelloCommand()
    return ByeCommand()
