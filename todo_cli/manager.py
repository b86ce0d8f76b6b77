"""
TODO CLI - Task Manager
=======================
Owns the loaded task list, applies changes and writes the whole list back
after every change.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional, TextIO, Tuple

from .dates import resolve_local
from .errors import TaskNotFoundError
from .render import filter_tasks, print_tasks
from .schema import Task, TaskPriority
from .storage import TaskStore

logger = logging.getLogger(__name__)


class TaskManager:
    """
    Task collection manager

    Tasks are kept in insertion order. Ids are max(id) + 1, so an id freed
    by removing the newest task is handed out again, but ids below the
    current maximum never are.
    """

    def __init__(self, store: TaskStore, tasks: Iterable[Task] = ()):
        self.store = store
        self._tasks: List[Task] = list(tasks)

    @classmethod
    def load(cls, store: TaskStore) -> "TaskManager":
        return cls(store, store.load())

    # ========================================
    # PERSISTENCE
    # ========================================

    def save(self) -> None:
        self.store.save(self._tasks)

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add(
        self,
        text: str,
        priority: Optional[TaskPriority] = None,
        tags: Optional[Iterable[str]] = None,
        due: Optional[datetime] = None
    ) -> Task:
        """Append a new task and save"""
        due_date = resolve_local(due) if due is not None else None

        task = Task(
            id=self._next_id(),
            text=text,
            priority=priority,
            tags=list(tags or []),
            due_date=due_date
        )
        self._tasks.append(task)
        self.save()

        logger.info(f"➕ Added task #{task.id}: {task.text}")
        return task

    def mark_done(self, task_id: int) -> Task:
        task = self.get(task_id)
        task.done = True
        self.save()

        logger.info(f"✅ Completed task #{task_id}")
        return task

    def toggle(self, task_id: int) -> Task:
        task = self.get(task_id)
        task.done = not task.done
        self.save()

        logger.info(f"🔁 Toggled task #{task_id} (done={task.done})")
        return task

    def remove(self, task_id: int) -> Task:
        task = self.get(task_id)
        self._tasks = [t for t in self._tasks if t is not task]
        self.save()

        logger.info(f"🗑️ Removed task #{task_id}")
        return task

    def get(self, task_id: int) -> Task:
        """Get task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        logger.warning(f"Task #{task_id} not found")
        raise TaskNotFoundError(task_id)

    def list(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    # ========================================
    # REPORTING
    # ========================================

    def filter(
        self,
        priority: Optional[TaskPriority] = None,
        tag: Optional[str] = None,
        due_before: Optional[datetime] = None
    ) -> List[Task]:
        return filter_tasks(self._tasks, priority=priority, tag=tag, due_before=due_before)

    def print(
        self,
        priority: Optional[TaskPriority] = None,
        tag: Optional[str] = None,
        due_before: Optional[datetime] = None,
        file: Optional[TextIO] = None
    ) -> None:
        print_tasks(
            self._tasks,
            priority=priority,
            tag=tag,
            due_before=due_before,
            file=file
        )

    # ========================================
    # HELPER METHODS
    # ========================================

    def _next_id(self) -> int:
        return max((task.id for task in self._tasks), default=0) + 1
