"""
TODO CLI - Storage
==================
The whole collection lives in one JSON file. Every save rewrites it.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import ValidationError

from .errors import DeserializationError, StorageError
from .schema import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """Reads and writes the task list file"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> List[Task]:
        """Load all tasks. A missing file is an empty list."""
        if not self.path.exists():
            logger.debug(f"No task file at {self.path}, starting empty")
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except UnicodeDecodeError as e:
            raise DeserializationError(self.path, str(e)) from e
        except OSError as e:
            raise StorageError(self.path, "read", str(e)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise DeserializationError(self.path, str(e)) from e

        if not isinstance(data, list):
            raise DeserializationError(
                self.path, f"expected a list of tasks, got {type(data).__name__}"
            )

        try:
            tasks = [Task.model_validate(item) for item in data]
        except ValidationError as e:
            raise DeserializationError(self.path, str(e)) from e

        seen = set()
        for task in tasks:
            if task.id in seen:
                raise DeserializationError(self.path, f"duplicate task id {task.id}")
            seen.add(task.id)

        logger.info(f"📂 Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the task file with the full collection"""
        records = [task.model_dump(mode="json") for task in tasks]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            raise StorageError(self.path, "write", str(e)) from e

        logger.info(f"✅ Saved {len(records)} tasks to {self.path}")
