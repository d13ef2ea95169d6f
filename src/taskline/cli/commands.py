# src/taskline/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..core.commands import (
    ByeCommand,
    ClearCommand,
    Command,
    DeadlineCommand,
    DeleteCommand,
    DoneCommand,
    EventCommand,
    FindCommand,
    HelloCommand,
    ListCommand,
    TodoCommand,
)
from ..core.state import AppState
from ..tasks.task_models import Deadline, Event, Task, ToDo

CommandHandler = Callable[[AppState, Any], str]

logger = logging.getLogger(__name__)

FAREWELL = "Bye. Hope to see you again soon!"
CLEAR_SCREEN = "\n" * 20


class CommandRegistry:
    """Routes each typed command to its handler (todo, list, done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[type, CommandHandler] = {}
        self._help: dict[type, str] = {}

    def register(self, command_type: type, handler: CommandHandler, help_text: str) -> None:
        self._handlers[command_type] = handler
        self._help[command_type] = help_text

    def handle(self, state: AppState, command: Command) -> str:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise LookupError(f"No handler registered for {type(command).__name__}")
        logger.debug("Dispatching %r", command)
        return handler(state, command)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _count_line(state: AppState) -> str:
    n = len(state.tasks)
    noun = "task" if n == 1 else "tasks"
    return f"Now you have {n} {noun} in the list."


def _numbered(tasks: Iterable[Task]) -> list[str]:
    return [f"{i}.{t}" for i, t in enumerate(tasks, start=1)]


def greeting(app_name: str) -> str:
    return f"Hello! I'm {app_name}.\nWhat can I do for you?\n\n{registry.build_help()}"


def _added(state: AppState, task: Task) -> str:
    state.tasks.add(task)
    logger.info("Task added kind=%s total=%d", task.kind.value, len(state.tasks))
    return f"Got it. I've added this task:\n  {task}\n{_count_line(state)}"


def cmd_todo(state: AppState, command: TodoCommand) -> str:
    return _added(state, ToDo(command.description))


def cmd_deadline(state: AppState, command: DeadlineCommand) -> str:
    return _added(state, Deadline(command.description, command.date))


def cmd_event(state: AppState, command: EventCommand) -> str:
    return _added(state, Event(command.description, command.date))


def cmd_list(state: AppState, command: ListCommand) -> str:
    if not len(state.tasks):
        return "Your task list is empty."
    return "\n".join(["Here are the tasks in your list:", *_numbered(state.tasks)])


def cmd_done(state: AppState, command: DoneCommand) -> str:
    task = state.tasks.update_status(command.index, True)
    logger.info("Task %d marked done", command.index)
    return f"Nice! I've marked this task as done:\n  {task}"


def cmd_delete(state: AppState, command: DeleteCommand) -> str:
    task = state.tasks.remove(command.index)
    logger.info("Task %d removed total=%d", command.index, len(state.tasks))
    return f"Noted. I've removed this task:\n  {task}\n{_count_line(state)}"


def cmd_find(state: AppState, command: FindCommand) -> str:
    matches = state.tasks.find_by_text(command.keyword)
    if not matches:
        return "No matching tasks found."
    return "\n".join(["Here are the matching tasks in your list:", *_numbered(matches)])


def cmd_clear(state: AppState, command: ClearCommand) -> str:
    return CLEAR_SCREEN


def cmd_hello(state: AppState, command: HelloCommand) -> str:
    return greeting(str(getattr(state.settings, "app_name", "taskline")))


def cmd_bye(state: AppState, command: ByeCommand) -> str:
    return FAREWELL


registry.register(TodoCommand, cmd_todo, "todo <description>")
registry.register(DeadlineCommand, cmd_deadline, "deadline <description> /by <YYYY-MM-DD>")
registry.register(EventCommand, cmd_event, "event <description> /at <YYYY-MM-DD>")
registry.register(ListCommand, cmd_list, "list")
registry.register(DoneCommand, cmd_done, "done <task number>")
registry.register(DeleteCommand, cmd_delete, "delete <task number>")
registry.register(FindCommand, cmd_find, "find <text>")
registry.register(ClearCommand, cmd_clear, "clear")
registry.register(HelloCommand, cmd_hello, "hello")
registry.register(ByeCommand, cmd_bye, "bye")
