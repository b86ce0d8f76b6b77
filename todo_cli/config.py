"""
TODO CLI - Configuration
========================
Where the task file lives and how much gets logged.
"""

import logging
import os
from pathlib import Path

DEFAULT_FILE_NAME = "todos.json"
FILE_ENV_VAR = "TODO_FILE"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def default_store_path() -> Path:
    """
    Default task file:
      ./todos.json

    Override with the TODO_FILE env var or the --file CLI option.
    """
    env = os.getenv(FILE_ENV_VAR)
    if env:
        return Path(env).expanduser().resolve()

    return Path(DEFAULT_FILE_NAME).resolve()


def setup_logging(verbosity: int = 0) -> None:
    """WARNING by default, INFO with -v, DEBUG with -vv. Logs go to stderr."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("todo_cli").setLevel(level)
