# src/taskpal/tasks/task_store.py

from __future__ import annotations

import contextlib
import csv
import logging
import os
from datetime import date
from pathlib import Path

from ..core.errors import CorruptStore, StorageUnavailable
from .task_list import TaskList
from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)

DELIMITER = "|"
FIELD_COUNT = 4


class _StoreDialect(csv.Dialect):
    """Shared by reader and writer so fields holding line breaks get quoted."""

    delimiter = DELIMITER
    quotechar = '"'
    doublequote = True
    skipinitialspace = False
    lineterminator = "\r\n"
    quoting = csv.QUOTE_MINIMAL


class TaskStore:
    """
    Line-oriented task store: one `kind|done|description|payload` record per task.

    Payload is empty for a todo, an ISO date (yyyy-mm-dd) for a deadline and
    free text for an event. Fields go through the csv module so a description
    containing the delimiter or a line break still round-trips.

    The file is read once (load) and overwritten wholesale (save).
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding ----

    @staticmethod
    def _task_to_row(task: Task) -> list[str]:
        match task.kind:
            case TaskKind.TODO:
                payload = ""
            case TaskKind.DEADLINE:
                payload = task.due_date.isoformat()
            case TaskKind.EVENT:
                payload = task.when or ""
        return [task.marker, "1" if task.done else "0", task.description, payload]

    @staticmethod
    def _row_to_task(row: list[str], line_no: int) -> Task:
        if len(row) != FIELD_COUNT:
            raise CorruptStore(
                f"expected {FIELD_COUNT} fields, got {len(row)}", line_no=line_no
            )
        marker, done_raw, description, payload = row

        try:
            kind = TaskKind.from_marker(marker)
        except CorruptStore as e:
            raise CorruptStore(e.reason, line_no=line_no) from None

        if done_raw not in ("0", "1"):
            raise CorruptStore(f"bad done flag {done_raw!r}", line_no=line_no)
        if not description.strip():
            raise CorruptStore("empty description", line_no=line_no)

        match kind:
            case TaskKind.TODO:
                if payload:
                    raise CorruptStore("todo record carries a payload", line_no=line_no)
                task = Task.todo(description)
            case TaskKind.DEADLINE:
                try:
                    due = date.fromisoformat(payload)
                except ValueError:
                    raise CorruptStore(f"bad deadline date {payload!r}", line_no=line_no) from None
                task = Task.deadline(description, due)
            case TaskKind.EVENT:
                if not payload.strip():
                    raise CorruptStore("event record has no time", line_no=line_no)
                task = Task.event(description, payload)

        task.done = done_raw == "1"
        return task

    # ---- public API ----

    def load(self) -> TaskList:
        if not self._path.exists():
            logger.info("No task store at %s yet; starting with an empty list.", self._path)
            return TaskList()

        tasks = TaskList()
        try:
            with self._path.open("r", encoding="utf-8", newline="") as f:
                reader = csv.reader(f, dialect=_StoreDialect)
                for row in reader:
                    if not row:
                        continue
                    tasks.add(self._row_to_task(row, reader.line_num))
        except OSError as e:
            raise StorageUnavailable(f"Cannot read task store {self._path}: {e}") from e
        except (csv.Error, UnicodeDecodeError) as e:
            raise CorruptStore(str(e)) from e

        logger.info("Loaded %d tasks from %s", tasks.count(), self._path)
        return tasks

    def save(self, tasks: TaskList) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, dialect=_StoreDialect)
                for task in tasks:
                    writer.writerow(self._task_to_row(task))
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            logger.error("Failed to save tasks to %s: %s", self._path, e)
            raise StorageUnavailable(f"I couldn't save your tasks to {self._path}.") from e

        logger.info("Saved %d tasks to %s", tasks.count(), self._path)
