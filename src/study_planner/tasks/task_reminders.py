# src/study_planner/tasks/task_reminders.py

from __future__ import annotations

"""
Due-soon scan.

Decides which incomplete tasks are inside the lookahead window and what the
reminder should say. Delivering the reminder is the notifier's job.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .task_dates import parse_instant, round_half_up
from .task_models import ReminderSettings, Task

DUE_SOON_TITLE = "Task Due Soon"


@dataclass(frozen=True, slots=True)
class Reminder:
    task: Task
    hours_left: float
    title: str
    message: str


def hours_until_due(task: Task, now: datetime) -> float | None:
    due = parse_instant(task.due_date)
    if due is None:
        return None
    return (due - parse_instant(now)).total_seconds() / 3600.0


def due_soon(
    tasks: Iterable[Task],
    now: datetime,
    lookahead_hours: float,
    *,
    enabled: bool = True,
) -> list[Task]:
    """Incomplete tasks due within (0, lookahead_hours] of now, in input order."""
    if not enabled:
        return []
    out: list[Task] = []
    for t in tasks:
        if t.completed:
            continue
        hours = hours_until_due(t, now)
        if hours is not None and 0 < hours <= lookahead_hours:
            out.append(t)
    return out


def due_soon_reminders(
    tasks: Iterable[Task], now: datetime, settings: ReminderSettings
) -> list[Reminder]:
    reminders: list[Reminder] = []
    selected = due_soon(
        tasks, now, settings.notification_time, enabled=settings.enable_notifications
    )
    for t in selected:
        hours = hours_until_due(t, now) or 0.0
        reminders.append(
            Reminder(
                task=t,
                hours_left=hours,
                title=DUE_SOON_TITLE,
                message=f'"{t.name}" is due in {round_half_up(hours)} hours.',
            )
        )
    return reminders
