# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from taskpal.core.errors import CorruptStore
from taskpal.tasks.task_models import Task, TaskKind


def test_todo_renders_kind_and_checkbox() -> None:
    task = Task.todo("read book")
    assert task.render() == "[T][ ] read book"
    task.done = True
    assert str(task) == "[T][X] read book"


def test_deadline_renders_human_date() -> None:
    task = Task.deadline("Submit", date(2024, 3, 15))
    assert task.marker == "D"
    assert task.render() == "[D][ ] Submit (by: Mar 15 2024)"


def test_deadline_day_is_not_zero_padded() -> None:
    assert Task.deadline("x", date(2024, 1, 5)).render().endswith("(by: Jan 5 2024)")


def test_event_renders_time_text_verbatim() -> None:
    task = Task.event("project meeting", "Mon 2pm to 4pm")
    assert task.render() == "[E][ ] project meeting (at: Mon 2pm to 4pm)"


def test_description_is_read_only() -> None:
    task = Task.todo("a")
    with pytest.raises(AttributeError):
        task.description = "b"  # type: ignore[misc]


def test_tasks_compare_by_value() -> None:
    assert Task.todo("a") == Task.todo("a")
    assert Task.todo("a") != Task.event("a", "now")
    done = Task.todo("a")
    done.done = True
    assert done != Task.todo("a")


def test_kind_from_marker() -> None:
    assert TaskKind.from_marker("E") is TaskKind.EVENT
    with pytest.raises(CorruptStore):
        TaskKind.from_marker("X")


def test_payload_is_required_for_deadline_and_event() -> None:
    with pytest.raises(ValueError):
        Task(TaskKind.DEADLINE, "no date")
    with pytest.raises(ValueError):
        Task(TaskKind.EVENT, "no time")
