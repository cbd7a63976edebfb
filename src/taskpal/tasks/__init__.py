from .task_list import TaskList
from .task_models import Task, TaskKind
from .task_store import TaskStore

__all__ = ["Task", "TaskKind", "TaskList", "TaskStore"]
