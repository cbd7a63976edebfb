# tests/test_task_store.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from taskpal.core.errors import CorruptStore, StorageUnavailable
from taskpal.tasks.task_list import TaskList
from taskpal.tasks.task_models import Task
from taskpal.tasks.task_store import TaskStore


def _sample() -> TaskList:
    deadline = Task.deadline("Submit report", date(2024, 3, 15))
    deadline.done = True
    return TaskList(
        [
            Task.todo("read book"),
            deadline,
            Task.event("project meeting", "Monday 2pm to 4pm"),
        ]
    )


def test_missing_store_loads_empty_list(store: TaskStore) -> None:
    assert store.load() == TaskList()


def test_save_then_load_round_trips(store: TaskStore) -> None:
    original = _sample()
    store.save(original)
    assert store.load() == original


def test_record_format(store: TaskStore, store_path: Path) -> None:
    store.save(_sample())
    assert store_path.read_text("utf-8").splitlines() == [
        "T|0|read book|",
        "D|1|Submit report|2024-03-15",
        "E|0|project meeting|Monday 2pm to 4pm",
    ]


def test_delimiter_inside_description_round_trips(store: TaskStore) -> None:
    tasks = TaskList([Task.todo('pipes | and "quotes"'), Task.event("a|b", "x | y")])
    store.save(tasks)
    assert store.load() == tasks


def test_save_overwrites_previous_contents(store: TaskStore) -> None:
    store.save(_sample())
    store.save(TaskList([Task.todo("only")]))
    assert [t.description for t in store.load()] == ["only"]


def test_blank_lines_are_ignored(store: TaskStore, store_path: Path) -> None:
    store_path.write_text("T|0|a|\n\nT|1|b|\n", "utf-8")
    loaded = store.load()
    assert loaded.count() == 2
    assert loaded.get(2).done is True


@pytest.mark.parametrize(
    "line",
    [
        "T|0|too few",
        "T|0|a||extra",
        "X|0|unknown kind|",
        "T|2|bad flag|",
        "T|0| |",
        "T|0|todo with payload|oops",
        "D|0|bad date|15/03/2024",
        "E|0|event without time|",
    ],
)
def test_malformed_record_is_corrupt(store: TaskStore, store_path: Path, line: str) -> None:
    store_path.write_text(f"T|0|fine|\n{line}\n", "utf-8")
    with pytest.raises(CorruptStore) as exc:
        store.load()
    assert exc.value.line_no == 2


def test_save_into_missing_directory_is_unavailable(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "missing" / "tasks.txt")
    with pytest.raises(StorageUnavailable):
        store.save(_sample())
    assert not (tmp_path / "missing").exists()


def test_failed_save_keeps_previous_store(store: TaskStore, store_path: Path, monkeypatch) -> None:
    store.save(TaskList([Task.todo("kept")]))

    def boom(src, dst):
        raise PermissionError("read-only")

    monkeypatch.setattr("taskpal.tasks.task_store.os.replace", boom)
    with pytest.raises(StorageUnavailable):
        store.save(_sample())

    assert [t.description for t in store.load()] == ["kept"]
    assert not store_path.with_name(store_path.name + ".tmp").exists()


def test_line_breaks_inside_fields_round_trip(store: TaskStore) -> None:
    tasks = TaskList(
        [
            Task.todo("a\rb"),
            Task.todo("first\nsecond"),
            Task.event("call\r\nback", "Mon\r9am"),
            Task.todo("after"),
        ]
    )
    store.save(tasks)
    assert store.load() == tasks
