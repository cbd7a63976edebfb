# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskpal.core.interpreter import Interpreter
from taskpal.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture()
def repo() -> FakeTaskRepo:
    """In-memory store that records save calls."""
    return FakeTaskRepo()


@pytest.fixture()
def interpreter(repo: FakeTaskRepo) -> Interpreter:
    """Started interpreter wired to the fake store (empty task list)."""
    interp = Interpreter(repo, app_name="Duke")
    interp.start()
    return interp


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"


@pytest.fixture()
def store(store_path: Path) -> TaskStore:
    """
    Real file-backed store in a per-test directory.

    NOTE: We keep the real TaskStore here because the on-disk format
    is part of what we want to test.
    """
    return TaskStore(store_path)
