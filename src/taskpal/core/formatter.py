# src/taskpal/core/formatter.py

"""
User-facing reply strings.

Pure functions: no I/O, no mutation. Every reply line is indented by a tab so
front ends can show it verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..tasks.task_models import Task

INDENT = "\t"


def wrap(text: str) -> str:
    return "\n".join(f"{INDENT}{line}" for line in text.splitlines())


def _numbered(items: Iterable[tuple[int, Task]]) -> list[str]:
    return [f"{pos}. {task.render()}" for pos, task in items]


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def greeting(app_name: str) -> str:
    return wrap(f"Hello! I'm {app_name}\nWhat can I do for you?")


def goodbye() -> str:
    return wrap("Bye. Hope to see you again soon!")


def command_list(commands: Sequence[tuple[str, str]]) -> str:
    width = max((len(usage) for usage, _ in commands), default=0)
    lines = ["Here are the commands I understand:"]
    lines += [f"  {usage.ljust(width)}  {desc}" for usage, desc in commands]
    return wrap("\n".join(lines))


def help_text(commands: Sequence[tuple[str, str]]) -> str:
    hint = wrap("Looks like you're stuck. Let me help!")
    return f"{hint}\n{command_list(commands)}"


def task_added(task: Task, count: int) -> str:
    return wrap(f"Got it. I've added this task:\n  {task.render()}\n{_count_line(count)}")


def task_removed(task: Task, count: int) -> str:
    return wrap(f"Noted. I've removed this task:\n  {task.render()}\n{_count_line(count)}")


def task_marked(task: Task) -> str:
    return wrap(f"Nice! I've marked this task as done:\n  {task.render()}")


def task_unmarked(task: Task) -> str:
    return wrap(f"OK, I've marked this task as not done yet:\n  {task.render()}")


def matching_tasks(matches: Iterable[tuple[int, Task]]) -> str:
    lines = ["Here are the matching tasks in your list:", *_numbered(matches)]
    return wrap("\n".join(lines))


def task_listing(tasks: Iterable[tuple[int, Task]]) -> str:
    numbered = _numbered(tasks)
    if not numbered:
        return wrap("Your list is empty.")
    return wrap("\n".join(["Here are the tasks in your list:", *numbered]))


def error(message: str) -> str:
    return wrap(f"OOPS!!! {message}")
