# src/taskpal/core/interpreter.py

"""
Command interpreter: one line of text in, one reply string out.

Front ends only need greet(), process() and the finished flag; the
interpreter never prints.
"""

from __future__ import annotations

import logging

from ..tasks.task_list import TaskList
from . import formatter
from .commands import CommandRegistry, registry as default_registry
from .errors import ErrorKind
from .ports import TaskRepo
from .results import Err, Ok, Result
from .state import Session

logger = logging.getLogger(__name__)

HELP_AFTER_UNKNOWN = 2


class Interpreter:
    def __init__(
        self,
        store: TaskRepo,
        *,
        app_name: str = "Duke",
        commands: CommandRegistry | None = None,
    ) -> None:
        self._commands = commands or default_registry
        self._session = Session(
            store=store, app_name=app_name, command_usage=self._commands.usage()
        )

    def start(self) -> None:
        """Load the durable store. CorruptStore / StorageUnavailable propagate."""
        self._session.tasks = self._session.store.load()
        logger.debug("Interpreter started with %d tasks.", self._session.tasks.count())

    @property
    def tasks(self) -> TaskList:
        return self._session.tasks

    @property
    def finished(self) -> bool:
        return self._session.finished

    @property
    def invalid_streak(self) -> int:
        return self._session.invalid_streak

    def greet(self) -> str:
        return formatter.greeting(self._session.app_name)

    def process(self, line: str) -> str:
        session = self._session

        if session.invalid_streak >= HELP_AFTER_UNKNOWN:
            session.invalid_streak = 0
            return formatter.help_text(self._commands.usage())

        result = self._commands.handle(session, line)
        if result is None:
            session.invalid_streak += 1
            keyword = (line.split() or [""])[0]
            logger.debug("Unknown command %r (streak=%d)", keyword, session.invalid_streak)
            result = Err(ErrorKind.UNKNOWN_COMMAND, "I'm sorry, but I don't know what that means :-(")

        return self._render(result)

    @staticmethod
    def _render(result: Result) -> str:
        match result:
            case Ok(message=message):
                return message
            case Err(kind=kind, detail=detail):
                logger.debug("Command rejected: %s", kind)
                return formatter.error(detail)
