# src/taskpal/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from ..core.errors import CorruptStore


class TaskKind(StrEnum):
    """
    Task variants, valued by the marker used both on screen and in the store.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_marker(cls, raw: str) -> TaskKind:
        try:
            return cls(raw)
        except ValueError:
            raise CorruptStore(f"unknown task kind {raw!r}") from None


def format_due(due: date) -> str:
    """Human form of a deadline date, e.g. 'Mar 15 2024'."""
    return f"{due:%b} {due.day} {due:%Y}"


@dataclass(slots=True)
class Task:
    """
    One task: shared fields plus a kind-specific payload.

    - TODO carries no payload
    - DEADLINE carries `due` (calendar date)
    - EVENT carries `when` (free text, stored verbatim)
    """

    kind: TaskKind
    _description: str
    done: bool = False
    due: date | None = None
    when: str | None = None

    def __post_init__(self) -> None:
        if self.kind is TaskKind.DEADLINE and self.due is None:
            raise ValueError("deadline task needs a due date")
        if self.kind is TaskKind.EVENT and self.when is None:
            raise ValueError("event task needs a time")

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, due: date) -> Task:
        return cls(TaskKind.DEADLINE, description, due=due)

    @classmethod
    def event(cls, description: str, when: str) -> Task:
        return cls(TaskKind.EVENT, description, when=when)

    @property
    def description(self) -> str:
        return self._description

    @property
    def due_date(self) -> date:
        if self.due is None:
            raise ValueError(f"{self.kind.name.lower()} task has no due date")
        return self.due

    @property
    def marker(self) -> str:
        return self.kind.value

    def suffix(self) -> str:
        match self.kind:
            case TaskKind.TODO:
                return ""
            case TaskKind.DEADLINE:
                return f" (by: {format_due(self.due_date)})"
            case TaskKind.EVENT:
                return f" (at: {self.when})"

    def render(self) -> str:
        check = "X" if self.done else " "
        return f"[{self.marker}][{check}] {self.description}{self.suffix()}"

    def __str__(self) -> str:
        return self.render()
