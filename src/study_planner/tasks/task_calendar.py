# src/study_planner/tasks/task_calendar.py

from __future__ import annotations

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from .task_dates import to_day
from .task_models import Task

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True, slots=True)
class DayCell:
    day: int
    date: date
    has_tasks: bool
    is_today: bool
    is_selected: bool


def days_in_month(year: int, month: int) -> int:
    """Month length in the proleptic Gregorian calendar (month is 1..12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1..12, got {month}")
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st with Sunday=0."""
    return (date(year, month, 1).weekday() + 1) % 7


def month_title(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    idx = year * 12 + (month - 1) + delta
    return idx // 12, idx % 12 + 1


def month_grid(
    year: int,
    month: int,
    tasks: Iterable[Task],
    today: date | datetime,
    selected_date: date | datetime | None = None,
) -> list[DayCell | None]:
    """
    Cells for one calendar month.

    Leading None placeholders pad the first week up to the weekday of the 1st
    (Sunday first), followed by one DayCell per day of the month.
    """
    n_days = days_in_month(year, month)
    due_days = {d for d in (to_day(t.due_date) for t in tasks) if d is not None}
    today_day = to_day(today)
    selected_day = to_day(selected_date) if selected_date is not None else None

    cells: list[DayCell | None] = [None] * first_weekday(year, month)
    for n in range(1, n_days + 1):
        d = date(year, month, n)
        cells.append(
            DayCell(
                day=n,
                date=d,
                has_tasks=d in due_days,
                is_today=d == today_day,
                is_selected=selected_day is not None and d == selected_day,
            )
        )
    return cells
