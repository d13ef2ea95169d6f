# src/taskline/core/validator.py

"""
Pre-dispatch validation.

Checks run in a fixed order and the first failure wins:
1) unknown command
2) missing argument
3) task index: numeric parse, then 1..task_count bounds
"""

from __future__ import annotations

from enum import StrEnum

from .errors import IndexOutOfRange, MissingArgument, UnknownCommand
from .parser import parse_index


class CommandName(StrEnum):
    TODO = "todo"
    EVENT = "event"
    DEADLINE = "deadline"
    LIST = "list"
    DONE = "done"
    BYE = "bye"
    DELETE = "delete"
    CLEAR = "clear"
    HELLO = "hello"
    FIND = "find"


NO_ARGUMENT_COMMANDS = frozenset(
    {CommandName.LIST, CommandName.BYE, CommandName.CLEAR, CommandName.HELLO}
)
INDEXED_COMMANDS = frozenset({CommandName.DONE, CommandName.DELETE})


def check_known_command(command: str) -> CommandName:
    try:
        return CommandName(command.lower())
    except ValueError:
        raise UnknownCommand(command) from None


def check_has_argument(name: CommandName, details: str) -> None:
    if name not in NO_ARGUMENT_COMMANDS and not details:
        raise MissingArgument(name)


def check_task_index(name: CommandName, details: str, task_count: int) -> int:
    index = parse_index(details)
    if not 1 <= index <= task_count:
        raise IndexOutOfRange(name, index)
    return index


def validate(command: str, details: str, task_count: int) -> tuple[CommandName, int | None]:
    """
    Run the full check chain.

    Returns the resolved command name and, for done/delete, the validated
    1-based index (None otherwise).
    """
    name = check_known_command(command)
    check_has_argument(name, details)
    index = check_task_index(name, details, task_count) if name in INDEXED_COMMANDS else None
    return name, index
