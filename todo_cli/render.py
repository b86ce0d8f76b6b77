"""
TODO CLI - Listing
==================
Filtering and one-line-per-task formatting.
"""

import sys
from datetime import datetime
from typing import Iterable, List, Optional, TextIO

from .dates import format_local, resolve_local
from .schema import Task, TaskPriority

NO_TASKS_MESSAGE = "No tasks found."


def filter_tasks(
    tasks: Iterable[Task],
    priority: Optional[TaskPriority] = None,
    tag: Optional[str] = None,
    due_before: Optional[datetime] = None
) -> List[Task]:
    """
    Select the tasks that match every filter given.

    due_before keeps tasks due on or before that moment; a civil value is
    resolved against the local timezone first.
    """
    cutoff = resolve_local(due_before) if due_before is not None else None

    matched = []
    for task in tasks:
        if priority is not None and task.priority != priority:
            continue
        if tag is not None and tag not in task.tags:
            continue
        if cutoff is not None:
            if task.due_date is None or task.due_date > cutoff:
                continue
        matched.append(task)
    return matched


def format_task(task: Task) -> str:
    parts = [f"[{task.status_marker}] {task.id}: {task.text}"]
    if task.priority is not None:
        parts.append(f"({task.priority.label})")
    if task.tags:
        parts.append(f"[{', '.join(task.tags)}]")
    if task.due_date is not None:
        parts.append(f"due {format_local(task.due_date)}")
    return " ".join(parts)


def render_tasks(
    tasks: Iterable[Task],
    priority: Optional[TaskPriority] = None,
    tag: Optional[str] = None,
    due_before: Optional[datetime] = None
) -> str:
    matched = filter_tasks(tasks, priority=priority, tag=tag, due_before=due_before)
    if not matched:
        return NO_TASKS_MESSAGE
    return "\n".join(format_task(task) for task in matched)


def print_tasks(
    tasks: Iterable[Task],
    priority: Optional[TaskPriority] = None,
    tag: Optional[str] = None,
    due_before: Optional[datetime] = None,
    file: Optional[TextIO] = None
) -> None:
    output = render_tasks(tasks, priority=priority, tag=tag, due_before=due_before)
    print(output, file=file or sys.stdout)
