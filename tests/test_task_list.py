# tests/test_task_list.py

from __future__ import annotations

from datetime import date, datetime

from taskdesk.tasks.task_list import TaskList
from taskdesk.tasks.task_models import Priority, build_task


def _titles(tasks: TaskList) -> list[str]:
    return [t.title for t in tasks.list()]


def test_sorted_by_priority_then_due_date(make_task) -> None:
    tasks = TaskList()
    tasks.add(make_task("late normal", due="2024-03-01"))
    tasks.add(make_task("late urgent", priority=1, due="2024-02-01"))
    tasks.add(make_task("early normal", due="2024-01-01"))
    tasks.add(make_task("early urgent", priority=1, due="2024-01-15"))

    assert _titles(tasks) == ["early urgent", "late urgent", "early normal", "late normal"]


def test_ties_keep_insertion_order_and_undated_go_last(make_task) -> None:
    tasks = TaskList()
    tasks.add(make_task("undated", due=None))
    tasks.add(make_task("a", due="2024-05-05"))
    tasks.add(make_task("b", due="2024-05-05"))

    assert _titles(tasks) == ["a", "b", "undated"]


def test_remove_drops_every_matching_title(make_task) -> None:
    tasks = TaskList()
    tasks.add(make_task("dup"))
    tasks.add(make_task("other"))
    tasks.add(make_task("dup", priority=1))

    assert tasks.remove("dup") == 2
    assert _titles(tasks) == ["other"]


def test_remove_missing_title_leaves_collection_unchanged(make_task) -> None:
    tasks = TaskList()
    tasks.add(make_task("a"))
    tasks.add(make_task("b", priority=1))
    before = tasks.list()

    assert tasks.remove("nope") == 0
    assert tasks.list() == before


def test_modify_replaces_first_match_and_resorts(make_task) -> None:
    tasks = TaskList()
    tasks.add(make_task("x", due="2024-01-01"))
    tasks.add(make_task("y", due="2024-02-01"))

    replacement = make_task("y", priority=1, due="2024-02-01")
    assert tasks.modify("y", replacement) is True
    assert tasks.list()[0] is replacement

    assert tasks.modify("missing", make_task("z")) is False
    assert _titles(tasks) == ["y", "x"]


def test_list_is_a_copy(make_task) -> None:
    tasks = TaskList()
    tasks.add(make_task("a"))
    snapshot = tasks.list()
    snapshot.clear()
    assert len(tasks) == 1
    assert tasks.find("a") is not None
    assert tasks.find("b") is None


def test_build_task_parses_raw_form_values() -> None:
    task = build_task(title="Buy milk", description="", priority="1", due_date="2024-01-01", category="Personal")
    assert task.priority is Priority.HIGH
    assert task.is_urgent
    assert task.due_date == date(2024, 1, 1)

    sloppy = build_task(title="t", description="d", priority="high", due_date="soon", category="Work")
    assert sloppy.priority is Priority.NORMAL
    assert sloppy.due_date is None


def test_numeric_priority_values_count_as_high() -> None:
    for raw in (1, 1.0, "1.0", " 1 ", True):
        assert Priority.from_raw(raw) is Priority.HIGH, raw
    for raw in (0, 0.0, False, 2, "0.5", None):
        assert Priority.from_raw(raw) is Priority.NORMAL, raw


def test_datetime_due_date_is_truncated_to_a_date() -> None:
    task = build_task(
        title="t", description="", priority=0, due_date=datetime(2024, 1, 1, 9, 30), category="Work"
    )
    assert task.due_date == date(2024, 1, 1)
    assert type(task.due_date) is date
