# src/taskpal/core/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date, datetime

from ..tasks.task_models import Task
from . import formatter
from .errors import ErrorKind, IndexOutOfRange, StorageUnavailable
from .results import Err, Ok, Result
from .state import Session

CommandHandler = Callable[[Session, str], Result]

logger = logging.getLogger(__name__)

EVENT_DELIMITER = "/at "
EVENT_TIME_WORD = "from"
DEADLINE_DELIMITER = " /by "
DATE_INPUT_FORMAT = "%d/%m/%Y"
DATE_INPUT_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
POSITION_RE = re.compile(r"-?[0-9]+")


class CommandRegistry:
    """Keyword -> handler table used by the interpreter (todo, list, bye, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, tuple[str, str]] = {}

    def register(self, name: str, handler: CommandHandler, usage: str, help_text: str) -> None:
        self._handlers[name] = handler
        self._usage[name] = (usage, help_text)

    def handle(self, session: Session, line: str) -> Result | None:
        """
        Run the command on `line`.
        Returns None if the first token is not a registered keyword.
        """
        # a task is one line on disk and on screen
        line = " ".join(line.splitlines())
        parts = line.strip().split(maxsplit=1)
        name = parts[0] if parts else ""
        args = parts[1].strip() if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if handler is None:
            return None
        return handler(session, args)

    def usage(self) -> list[tuple[str, str]]:
        return list(self._usage.values())


registry = CommandRegistry()


# ---- argument parsing ----


def _parse_position(args: str, verb: str) -> int | Err:
    if POSITION_RE.fullmatch(args):
        return int(args)
    return Err(ErrorKind.MISSING_TARGET, f"You have to choose a task number to {verb}.")


def _parse_date(raw: str) -> date | None:
    raw = raw.strip()
    if not DATE_INPUT_RE.fullmatch(raw):
        return None
    try:
        return datetime.strptime(raw, DATE_INPUT_FORMAT).date()
    except ValueError:
        return None


def _empty_description(kind: str) -> Err:
    return Err(ErrorKind.EMPTY_DESCRIPTION, f"The description of a {kind} cannot be empty.")


def _add(session: Session, task: Task) -> Ok:
    session.tasks.add(task)
    return Ok(formatter.task_added(task, session.tasks.count()))


# ---- handlers ----


def cmd_bye(session: Session, args: str) -> Result:
    try:
        session.store.save(session.tasks)
    except StorageUnavailable as e:
        logger.warning("Save on exit failed; keeping %d tasks in memory.", session.tasks.count())
        return Err(ErrorKind.STORAGE_UNAVAILABLE, str(e))
    session.finished = True
    return Ok(formatter.goodbye())


def cmd_list(session: Session, args: str) -> Result:
    return Ok(formatter.task_listing(session.tasks.enumerate_tasks()))


def _position_command(
    verb: str,
    apply: Callable[[Session, int], Task],
    reply: Callable[[Session, Task], str],
) -> CommandHandler:
    def handler(session: Session, args: str) -> Result:
        if not args:
            return Err(ErrorKind.MISSING_TARGET, f"You have to choose a task to {verb}.")
        pos = _parse_position(args, verb)
        if isinstance(pos, Err):
            return pos
        try:
            task = apply(session, pos)
        except IndexOutOfRange as e:
            return Err(ErrorKind.INDEX_OUT_OF_RANGE, str(e))
        return Ok(reply(session, task))

    return handler


cmd_mark = _position_command(
    "mark",
    lambda s, pos: s.tasks.mark_done(pos),
    lambda s, task: formatter.task_marked(task),
)
cmd_unmark = _position_command(
    "unmark",
    lambda s, pos: s.tasks.mark_undone(pos),
    lambda s, task: formatter.task_unmarked(task),
)
cmd_delete = _position_command(
    "delete",
    lambda s, pos: s.tasks.remove(pos),
    lambda s, task: formatter.task_removed(task, s.tasks.count()),
)


def cmd_todo(session: Session, args: str) -> Result:
    if not args:
        return _empty_description("todo")
    return _add(session, Task.todo(args))


def cmd_event(session: Session, args: str) -> Result:
    """
    event <description> /at from <time>

    The time is kept as free text; only a leading "from" word is dropped.
    """
    if not args:
        return _empty_description("event")
    if EVENT_DELIMITER not in args:
        return Err(
            ErrorKind.MISSING_EVENT_TIME,
            "An event needs a time. Use: event <description> /at from <time>",
        )

    description, when = args.split(EVENT_DELIMITER, 1)
    description = description.strip()
    head, _, rest = when.strip().partition(" ")
    when = rest.strip() if head == EVENT_TIME_WORD else when.strip()

    if not description:
        return _empty_description("event")
    if not when:
        return Err(
            ErrorKind.MISSING_EVENT_TIME,
            "An event needs a time. Use: event <description> /at from <time>",
        )
    return _add(session, Task.event(description, when))


def cmd_deadline(session: Session, args: str) -> Result:
    """deadline <description> /by <dd/MM/yyyy>"""
    if not args:
        return _empty_description("deadline")

    # the keyword split already trimmed, so re-add the leading space the delimiter expects
    description, sep, raw_date = f" {args}".partition(DEADLINE_DELIMITER)
    due = _parse_date(raw_date) if sep else None
    if due is None:
        return Err(ErrorKind.INVALID_DATE_FORMAT, "Please input the date in the format dd/MM/yyyy.")

    description = description.strip()
    if not description:
        return _empty_description("deadline")
    return _add(session, Task.deadline(description, due))


def cmd_find(session: Session, args: str) -> Result:
    if not args:
        return Err(
            ErrorKind.EMPTY_SEARCH_TERM,
            "Invalid search term. Try adding part of a task description.",
        )
    matches = session.tasks.find_by_description(args)
    if not matches:
        return Err(ErrorKind.NO_MATCHING_TASK, "No such task matches your description.")
    return Ok(formatter.matching_tasks(matches))


def cmd_cmd(session: Session, args: str) -> Result:
    if args:
        return Err(
            ErrorKind.UNEXPECTED_ARGUMENT,
            "Invalid command used. Enter 'cmd' for a list of commands.",
        )
    return Ok(formatter.command_list(session.command_usage))


registry.register("todo", cmd_todo, "todo <description>", "Add a todo.")
registry.register(
    "deadline", cmd_deadline, "deadline <description> /by <dd/MM/yyyy>", "Add a task with a due date."
)
registry.register(
    "event", cmd_event, "event <description> /at from <time>", "Add an event happening at a time."
)
registry.register("list", cmd_list, "list", "Show all tasks.")
registry.register("mark", cmd_mark, "mark <n>", "Mark task n as done.")
registry.register("unmark", cmd_unmark, "unmark <n>", "Mark task n as not done.")
registry.register("delete", cmd_delete, "delete <n>", "Remove task n.")
registry.register("find", cmd_find, "find <keyword>", "Show tasks whose description contains keyword.")
registry.register("cmd", cmd_cmd, "cmd", "Show this command list.")
registry.register("bye", cmd_bye, "bye", "Save tasks and exit.")
