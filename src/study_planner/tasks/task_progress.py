# src/study_planner/tasks/task_progress.py

"""
Progress statistics.

- weekly/monthly completion rate over tasks created inside the window
- per-subject completion breakdown (first-occurrence order)
- minutes of completed work per day for the last seven days

All percentages are integers 0..100 rounded half up.
"""

from __future__ import annotations

import calendar
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .task_dates import parse_minutes, parse_timestamp, round_half_up, to_day, to_local_naive
from .task_models import Task

WEEKDAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True, slots=True)
class SubjectStat:
    subject: str
    completed_count: int
    total_count: int
    percent: int


@dataclass(frozen=True, slots=True)
class DayTotal:
    day: date
    label: str
    total_minutes: int


@dataclass(frozen=True, slots=True)
class ProgressReport:
    weekly_rate: int
    monthly_rate: int
    subjects: list[SubjectStat]
    daily_time: list[DayTotal]


def percent(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return round_half_up(part * 100 / whole)


def one_month_before(moment: datetime) -> datetime:
    """Same wall-clock time one calendar month earlier; the day is clamped to the month length."""
    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def completion_rate_since(tasks: Iterable[Task], since: datetime) -> int:
    since = to_local_naive(since)
    total = 0
    done = 0
    for t in tasks:
        created = parse_timestamp(t.created_at)
        if created is None or created < since:
            continue
        total += 1
        if t.completed:
            done += 1
    return percent(done, total)


def weekly_rate(tasks: Iterable[Task], now: datetime) -> int:
    return completion_rate_since(tasks, to_local_naive(now) - timedelta(days=7))


def monthly_rate(tasks: Iterable[Task], now: datetime) -> int:
    return completion_rate_since(tasks, one_month_before(to_local_naive(now)))


def subject_breakdown(tasks: Iterable[Task]) -> list[SubjectStat]:
    # dicts keep insertion order, which gives first-occurrence order for free
    counts: dict[str, list[int]] = {}
    for t in tasks:
        bucket = counts.setdefault(t.subject, [0, 0])
        bucket[1] += 1
        if t.completed:
            bucket[0] += 1
    return [
        SubjectStat(subject=s, completed_count=c, total_count=n, percent=percent(c, n))
        for s, (c, n) in counts.items()
    ]


def daily_completed_time(tasks: Sequence[Task], reference_day: date | datetime) -> list[DayTotal]:
    """Completed minutes per due day for the 7 days ending at reference_day, oldest first."""
    end = to_day(reference_day)
    if end is None:
        raise ValueError(f"invalid reference day: {reference_day!r}")

    per_day: dict[date, int] = {}
    for t in tasks:
        if not t.completed:
            continue
        due = to_day(t.due_date)
        if due is not None:
            per_day[due] = per_day.get(due, 0) + parse_minutes(t.estimated_time)

    out: list[DayTotal] = []
    for offset in range(6, -1, -1):
        d = end - timedelta(days=offset)
        out.append(DayTotal(day=d, label=WEEKDAY_ABBR[d.weekday()], total_minutes=per_day.get(d, 0)))
    return out


def progress_report(tasks: Sequence[Task], now: datetime) -> ProgressReport:
    local_now = to_local_naive(now)
    return ProgressReport(
        weekly_rate=weekly_rate(tasks, local_now),
        monthly_rate=monthly_rate(tasks, local_now),
        subjects=subject_breakdown(tasks),
        daily_time=daily_completed_time(tasks, local_now),
    )
