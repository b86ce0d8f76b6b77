"""
TODO CLI - Personal Task List
=============================

Add, list, complete, toggle and remove todo items with optional priority,
tags and due date. The whole list is kept in a single JSON file.

Usage:
    from todo_cli import TaskManager, TaskStore, TaskPriority

    manager = TaskManager.load(TaskStore("todos.json"))
    task = manager.add("buy milk", priority=TaskPriority.HIGH, tags=["home"])
    manager.mark_done(task.id)
    manager.print(tag="home")
"""

__version__ = "1.0.0"

from .schema import Task, TaskPriority

from .errors import (
    TodoError,
    StorageError,
    DeserializationError,
    TaskNotFoundError,
    InvalidDateTimeError
)

from .storage import TaskStore
from .manager import TaskManager

__all__ = [
    "TaskManager",
    "TaskStore",
    "Task",
    "TaskPriority",
    "TodoError",
    "StorageError",
    "DeserializationError",
    "TaskNotFoundError",
    "InvalidDateTimeError"
]
