# src/taskpal/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.interpreter import Interpreter

logger = logging.getLogger(__name__)

PROMPT = "> "


def run_console_loop(
    interpreter: Interpreter,
    *,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """
    Read lines, hand them to the interpreter, print replies verbatim.

    Stops once the interpreter reports the session finished (a successful
    `bye`). EOF / Ctrl+C stop the loop too, without saving.
    """
    logger.info("Console connector started.")
    output_fn(interpreter.greet())

    while not interpreter.finished:
        try:
            user_input = input_fn(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting without saving.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting without saving.")
            output_fn("")
            break

        if not user_input:
            continue

        try:
            reply = interpreter.process(user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "\tInternal error while handling that command."

        output_fn(reply)

    logger.info("Console connector finished.")
