# src/taskpal/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The interpreter depends on this Protocol instead of the concrete file store,
which keeps storage swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    """Durable task storage: read once at start, written wholesale at exit."""

    def load(self) -> TaskList: ...

    def save(self, tasks: TaskList) -> None: ...
