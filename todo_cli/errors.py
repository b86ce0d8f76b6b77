"""
TODO CLI - Errors
=================
Every failure the CLI reports is a TodoError. Argument errors stay with
argparse.
"""

from pathlib import Path
from datetime import datetime


class TodoError(Exception):
    """Base class for todo errors"""


class StorageError(TodoError):
    """Reading or writing the storage file failed"""

    def __init__(self, path: Path, action: str, reason: str):
        self.path = path
        super().__init__(f"Could not {action} {path}: {reason}")


class DeserializationError(TodoError):
    """The storage file exists but its content is not a valid task list"""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Invalid task data in {path}: {reason}")


class TaskNotFoundError(TodoError):
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task #{task_id} not found")


class InvalidDateTimeError(TodoError):
    """A civil datetime does not map to exactly one instant in the local zone"""

    def __init__(self, value: datetime):
        self.value = value
        super().__init__(
            f"{value:%Y-%m-%d %H:%M} is ambiguous or does not exist in the local timezone"
        )
