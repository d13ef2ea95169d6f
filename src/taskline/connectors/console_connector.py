# src/taskline/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.commands import ByeCommand, build_command
from ..core.errors import StorageIOFailure, TasklineError
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]

PROMPT = "> "


def _save(state: AppState, print_fn: PrintFn) -> None:
    try:
        state.storage.save(state.tasks)
    except StorageIOFailure as e:
        print_fn(
            f"[WARN] {e.message}\n"
            "[WARN] Your changes are kept in memory but the task file may be out of date."
        )


def run_console_loop(state: AppState, input_fn: InputFn = input, print_fn: PrintFn = print) -> None:
    """
    Read-eval-print loop.

    Each non-blank line is parsed, validated, dispatched and then the whole
    list is saved, whether the command succeeded or not. Ends on `bye`,
    EOF or Ctrl+C.
    """
    logger.info("Console connector started (tasks=%d).", len(state.tasks))

    while True:
        try:
            user_input = input_fn(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print_fn("")
            break

        if not user_input:
            continue

        finished = False
        try:
            command = build_command(user_input, len(state.tasks))
            reply = command_registry.handle(state, command)
            finished = isinstance(command, ByeCommand)
        except TasklineError as e:
            logger.debug("Rejected line %r: %s", user_input, e)
            reply = e.message
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        _save(state, print_fn)
        print_fn(reply)

        if finished:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
