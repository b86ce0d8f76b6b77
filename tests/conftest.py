import time
from pathlib import Path

import pytest

from todo_cli.manager import TaskManager
from todo_cli.storage import TaskStore

# US Eastern rules as a POSIX TZ string, so no tz database is needed.
EASTERN_TZ = "EST5EDT,M3.2.0,M11.1.0"


@pytest.fixture()
def eastern_tz(monkeypatch):
    """Pin the process-local timezone to US Eastern for the test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", EASTERN_TZ)
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def store(store_path: Path) -> TaskStore:
    return TaskStore(store_path)


@pytest.fixture()
def manager(store: TaskStore) -> TaskManager:
    return TaskManager.load(store)
