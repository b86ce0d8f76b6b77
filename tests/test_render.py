import io
from datetime import datetime, timedelta, timezone

import pytest

from todo_cli.errors import InvalidDateTimeError
from todo_cli.render import (
    NO_TASKS_MESSAGE,
    filter_tasks,
    format_task,
    print_tasks,
    render_tasks,
)
from todo_cli.schema import Task, TaskPriority

EDT = timezone(timedelta(hours=-4))


@pytest.fixture()
def tasks():
    return [
        Task(id=1, text="file taxes", priority=TaskPriority.HIGH, tags=["admin"],
             due_date=datetime(2026, 10, 20, 9, 0, tzinfo=EDT)),
        Task(id=2, text="buy milk", priority=TaskPriority.LOW, tags=["home", "errands"]),
        Task(id=4, text="fix sink", priority=TaskPriority.HIGH, tags=["home"],
             due_date=datetime(2026, 10, 25, 9, 0, tzinfo=EDT)),
        Task(id=3, text="read book", tags=["Home"], done=True),
    ]


def _ids(selected):
    return [t.id for t in selected]


def test_no_filters_returns_everything_in_order(tasks):
    assert _ids(filter_tasks(tasks)) == [1, 2, 4, 3]


def test_priority_filter_skips_tasks_without_priority(tasks):
    assert _ids(filter_tasks(tasks, priority=TaskPriority.HIGH)) == [1, 4]
    assert _ids(filter_tasks(tasks, priority=TaskPriority.MEDIUM)) == []


def test_tag_filter_is_exact_and_case_sensitive(tasks):
    assert _ids(filter_tasks(tasks, tag="home")) == [2, 4]
    assert _ids(filter_tasks(tasks, tag="Home")) == [3]
    assert _ids(filter_tasks(tasks, tag="hom")) == []


def test_priority_and_tag_filters_intersect(tasks):
    by_priority = set(_ids(filter_tasks(tasks, priority=TaskPriority.HIGH)))
    by_tag = set(_ids(filter_tasks(tasks, tag="home")))
    both = _ids(filter_tasks(tasks, priority=TaskPriority.HIGH, tag="home"))
    assert set(both) == by_priority & by_tag == {4}


def test_due_filter_is_inclusive_and_skips_undated(tasks, eastern_tz):
    assert _ids(filter_tasks(tasks, due_before=datetime(2026, 10, 20, 9, 0))) == [1]
    assert _ids(filter_tasks(tasks, due_before=datetime(2026, 10, 20, 8, 59))) == []
    assert _ids(filter_tasks(tasks, due_before=datetime(2026, 12, 31))) == [1, 4]


def test_due_filter_rejects_ambiguous_time(tasks, eastern_tz):
    with pytest.raises(InvalidDateTimeError):
        filter_tasks(tasks, due_before=datetime(2026, 11, 1, 1, 30))


def test_format_task(tasks, eastern_tz):
    assert format_task(tasks[0]) == "[ ] 1: file taxes (High) [admin] due 2026-10-20 09:00"
    assert format_task(tasks[1]) == "[ ] 2: buy milk (Low) [home, errands]"
    assert format_task(tasks[3]) == "[x] 3: read book [Home]"


def test_render_without_matches(tasks):
    assert render_tasks(tasks, tag="nothing") == NO_TASKS_MESSAGE
    assert render_tasks([]) == NO_TASKS_MESSAGE


def test_print_tasks_writes_one_line_per_match(tasks, eastern_tz):
    out = io.StringIO()
    print_tasks(tasks, tag="home", file=out)
    assert out.getvalue().splitlines() == [
        "[ ] 2: buy milk (Low) [home, errands]",
        "[ ] 4: fix sink (High) [home] due 2026-10-25 09:00",
    ]
