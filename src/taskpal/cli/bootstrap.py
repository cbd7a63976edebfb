# src/taskpal/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (or loads them once),
- ensures local (gitignored) directories exist,
- wires the file store into an Interpreter and loads the saved tasks.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.interpreter import Interpreter
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_interpreter(*, settings: Settings | None = None) -> Interpreter:
    """
    Build a started Interpreter from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Raises CorruptStore / StorageUnavailable if the saved tasks cannot be loaded.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    interpreter = Interpreter(TaskStore(settings.tasks_path), app_name=settings.app_name)
    interpreter.start()
    logger.info("Session ready (tasks=%d, store=%s)", interpreter.tasks.count(), settings.tasks_path)
    return interpreter
