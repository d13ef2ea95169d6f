# src/taskline/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the task file, then runs the
console REPL in the main thread until `bye` or EOF.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import greeting
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import StorageIOFailure
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except StorageIOFailure as e:
        logger.error("Cannot start: %s", e)
        print(e.message)
        sys.exit(1)

    print(greeting(settings.app_name))

    skipped = getattr(state.storage, "skipped_lines", [])
    if skipped:
        lines = ", ".join(str(n) for n in skipped)
        print(
            f"[WARN] Skipped {len(skipped)} unreadable line(s) in {settings.tasks_path}: {lines}. "
            "They will be dropped on the next save."
        )

    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
