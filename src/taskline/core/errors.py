# src/taskline/core/errors.py

"""
User-facing error taxonomy.

Every validation failure raised while interpreting a line derives from
TasklineError and carries the message printed by the console loop.
"""

from __future__ import annotations

from pathlib import Path


class TasklineError(Exception):
    """Base class for failures reported to the user instead of crashing the session."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UnknownCommand(TasklineError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Sorry, I don't know what '{command}' means.")
        self.command = command


class MissingArgument(TasklineError):
    def __init__(self, command: str) -> None:
        super().__init__(f"The '{command}' command needs more details.")
        self.command = command


class IndexOutOfRange(TasklineError):
    def __init__(self, command: str, index: int) -> None:
        super().__init__(f"There is no task number {index} to {command}.")
        self.command = command
        self.index = index


class NotANumber(TasklineError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"'{raw}' is not a task number. Write a whole number, e.g. 'done 2'.")
        self.raw = raw


class DateParseFailure(TasklineError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"'{raw}' is not a valid date. Use YYYY-MM-DD, e.g. 2024-01-15.")
        self.raw = raw


class MissingSeparator(TasklineError):
    def __init__(self, separator: str) -> None:
        marker = separator.strip()
        super().__init__(f"Missing '{marker}' marker. Write it as: <description> {marker} <YYYY-MM-DD>.")
        self.separator = separator


class StorageIOFailure(TasklineError):
    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Could not access task file {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
