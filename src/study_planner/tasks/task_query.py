# src/study_planner/tasks/task_query.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from .task_dates import parse_timestamp, to_day
from .task_models import Priority, Task

PRIORITY_FILTERS = ("all", "high", "medium", "low")
STATUS_FILTERS = ("all", "pending", "completed")


@dataclass(frozen=True, slots=True)
class TaskCounts:
    pending: int
    completed: int


def _matches_priority(task: Task, priority_filter: str) -> bool:
    return priority_filter == "all" or task.priority == priority_filter


def _matches_status(task: Task, status_filter: str) -> bool:
    if status_filter == "pending":
        return not task.completed
    if status_filter == "completed":
        return task.completed
    return True


def _matches_search(task: Task, needle: str) -> bool:
    if not needle:
        return True
    return (
        needle in task.name.lower()
        or needle in task.subject.lower()
        or bool(task.notes and needle in task.notes.lower())
    )


def _due_key(task: Task) -> tuple[bool, datetime]:
    # Unparseable due dates sort after every valid one.
    due = parse_timestamp(task.due_date)
    return (due is None, due or datetime.max)


def query(
    tasks: Iterable[Task],
    priority_filter: str = "all",
    status_filter: str = "all",
    search_text: str = "",
) -> list[Task]:
    """
    Filter and order tasks for the list view.

    A task is kept when it passes the priority, status and search filters.
    Search is a case-insensitive substring match on name, subject or notes.
    Order: incomplete first, then due date ascending, then priority rank.
    Remaining ties keep input order.
    """
    priority_filter = (priority_filter or "all").lower()
    status_filter = (status_filter or "all").lower()
    if priority_filter not in PRIORITY_FILTERS:
        raise ValueError(f"unknown priority filter: {priority_filter!r}")
    if status_filter not in STATUS_FILTERS:
        raise ValueError(f"unknown status filter: {status_filter!r}")

    needle = (search_text or "").lower()
    selected = [
        t
        for t in tasks
        if _matches_priority(t, priority_filter)
        and _matches_status(t, status_filter)
        and _matches_search(t, needle)
    ]
    selected.sort(key=lambda t: (t.completed, *_due_key(t), Priority.from_raw(t.priority).rank))
    return selected


def tasks_on_date(tasks: Iterable[Task], day: date | datetime) -> list[Task]:
    """Tasks due on the given local calendar day, ordered by priority only."""
    target = to_day(day)
    if target is None:
        return []
    on_day = [t for t in tasks if to_day(t.due_date) == target]
    on_day.sort(key=lambda t: Priority.from_raw(t.priority).rank)
    return on_day


def task_counts(tasks: Iterable[Task]) -> TaskCounts:
    pending = 0
    completed = 0
    for t in tasks:
        if t.completed:
            completed += 1
        else:
            pending += 1
    return TaskCounts(pending=pending, completed=completed)
