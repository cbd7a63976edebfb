# src/taskpal/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class Session:
    """
    Everything one conversation owns.

    invalid_streak counts unknown commands since help was last shown. Known
    commands, valid or not, leave it alone. Once it reaches 2 the next line
    returns help and resets it.
    """

    store: TaskRepo
    app_name: str = "Duke"
    tasks: TaskList = field(default_factory=TaskList)
    invalid_streak: int = 0
    finished: bool = False
    command_usage: list[tuple[str, str]] = field(default_factory=list)
