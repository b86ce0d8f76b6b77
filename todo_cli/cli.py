#!/usr/bin/env python3
"""
TODO CLI - Command Line Interface
=================================
Command-line tool for a personal todo list.

Usage:
    todo add "buy milk" --priority high --tag home --due "2026-10-20 18:00"
    todo list --tag home --due-before 2026-10-21
    todo done 1
    todo toggle 1
    todo remove 1
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import default_store_path, setup_logging
from .dates import parse_civil_datetime
from .errors import TodoError
from .manager import TaskManager
from .schema import TaskPriority
from .storage import TaskStore

logger = logging.getLogger(__name__)


def _priority(text: str) -> TaskPriority:
    try:
        return TaskPriority.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _civil_datetime(text: str) -> datetime:
    try:
        return parse_civil_datetime(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _task_id(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid task ID '{text}'. Use a positive integer.") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"Invalid task ID '{text}'. Use a positive integer.")
    return value


def _task_text(text: str) -> str:
    if not text.strip():
        raise argparse.ArgumentTypeError("Task text must not be empty.")
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="TODO - a personal task list kept in a JSON file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todo add "buy milk"                        Add a task
  todo add "file taxes" -p high -t admin     Add with priority and tag
  todo add "call mum" --due "2026-10-20 18:00"
  todo list                                  List every task
  todo list -p high -t admin                 Tasks matching both filters
  todo list --due-before 2026-10-21          Tasks due on or before a time
  todo done 1                                Mark task 1 as done
  todo toggle 1                              Flip task 1 done/not done
  todo remove 1                              Delete task 1
        """
    )
    parser.add_argument(
        "--file",
        help="Path to the task file (default: ./todos.json or TODO_FILE env var)"
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a new task")
    add_parser.add_argument("text", type=_task_text, help="Task description")
    add_parser.add_argument("-p", "--priority", type=_priority, help="high, medium or low")
    add_parser.add_argument(
        "-t", "--tag", dest="tags", action="append", default=[], help="Tag (repeatable)"
    )
    add_parser.add_argument("--due", type=_civil_datetime, help="Due date/time in local time")

    # LIST command
    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument("-p", "--priority", type=_priority, help="Only this priority")
    list_parser.add_argument("-t", "--tag", help="Only tasks with this tag")
    list_parser.add_argument(
        "--due-before", type=_civil_datetime, help="Only tasks due on or before this local time"
    )
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # DONE command
    done_parser = subparsers.add_parser("done", help="Mark a task as done")
    done_parser.add_argument("task_id", type=_task_id, help="Task ID")

    # TOGGLE command
    toggle_parser = subparsers.add_parser("toggle", help="Flip a task between done and not done")
    toggle_parser.add_argument("task_id", type=_task_id, help="Task ID")

    # REMOVE command
    remove_parser = subparsers.add_parser("remove", help="Remove a task")
    remove_parser.add_argument("task_id", type=_task_id, help="Task ID")

    return parser


def _store_path(args: argparse.Namespace) -> Path:
    if args.file:
        return Path(args.file).expanduser().resolve()
    return default_store_path()


def run(args: argparse.Namespace) -> int:
    manager = TaskManager.load(TaskStore(_store_path(args)))

    if args.command == "add":
        task = manager.add(
            args.text,
            priority=args.priority,
            tags=args.tags,
            due=args.due
        )
        print(f"Added task #{task.id}: {task.text}")

    elif args.command == "list":
        if args.json:
            tasks = manager.filter(
                priority=args.priority, tag=args.tag, due_before=args.due_before
            )
            print(json.dumps([t.model_dump(mode="json") for t in tasks], indent=2, ensure_ascii=False))
        else:
            manager.print(priority=args.priority, tag=args.tag, due_before=args.due_before)

    elif args.command == "done":
        manager.mark_done(args.task_id)
        print(f"Marked task #{args.task_id} as done.")

    elif args.command == "toggle":
        task = manager.toggle(args.task_id)
        state = "done" if task.done else "not done"
        print(f"Task #{task.id} is now {state}.")

    elif args.command == "remove":
        task = manager.remove(args.task_id)
        print(f"Removed task #{task.id}: {task.text}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        return run(args)
    except TodoError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
