# src/taskpal/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import IndexOutOfRange
from .task_models import Task


class TaskList:
    """
    Ordered task collection addressed by 1-based position.

    Positions are not stable ids: removing a task shifts every later task
    down by one.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    # ---- helpers ----

    def _check(self, index: int) -> int:
        if index < 1 or index > len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))
        return index - 1

    # ---- mutation ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def mark_done(self, index: int) -> Task:
        task = self._tasks[self._check(index)]
        task.done = True
        return task

    def mark_undone(self, index: int) -> Task:
        task = self._tasks[self._check(index)]
        task.done = False
        return task

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._check(index))

    # ---- queries ----

    def get(self, index: int) -> Task:
        return self._tasks[self._check(index)]

    def count(self) -> int:
        return len(self._tasks)

    def enumerate_tasks(self) -> Iterator[tuple[int, Task]]:
        return enumerate(self._tasks, start=1)

    def find_by_description(self, query: str) -> list[tuple[int, Task]]:
        """Case-insensitive substring search; an empty result is not an error here."""
        needle = query.lower()
        return [(pos, t) for pos, t in self.enumerate_tasks() if needle in t.description.lower()]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
