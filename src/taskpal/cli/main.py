# src/taskpal/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the saved tasks, then runs the console REPL in
the main thread until `bye`.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_interpreter
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import StoreError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        file_logging=settings.file_logging,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        interpreter = create_interpreter(settings=settings)
    except StoreError:
        # No partial recovery: a store we cannot read must be fixed by hand.
        logger.exception("Cannot load tasks from %s", settings.tasks_path)
        sys.exit(1)

    run_console_loop(interpreter)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
