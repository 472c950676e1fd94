# tests/test_task_calendar.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from study_planner.tasks.task_calendar import (
    days_in_month,
    first_weekday,
    month_grid,
    month_title,
    shift_month,
)

from .fakes import make_task


@pytest.mark.parametrize(
    ("year", "month", "expected"),
    [
        (2024, 2, 29),
        (2023, 2, 28),
        (1900, 2, 28),
        (2000, 2, 29),
        (2024, 4, 30),
        (2024, 12, 31),
    ],
)
def test_days_in_month(year: int, month: int, expected: int) -> None:
    assert days_in_month(year, month) == expected


def test_days_in_month_rejects_bad_month() -> None:
    with pytest.raises(ValueError):
        days_in_month(2024, 13)


def test_february_leap_year_grid() -> None:
    # 2024-02-01 is a Thursday -> four Sunday-first placeholders.
    cells = month_grid(2024, 2, [], today=date(2024, 2, 14))

    assert first_weekday(2024, 2) == 4
    assert cells[:4] == [None, None, None, None]
    days = [c for c in cells if c is not None]
    assert len(cells) == 4 + 29
    assert [c.day for c in days] == list(range(1, 30))


def test_month_starting_on_sunday_has_no_placeholders() -> None:
    # 2024-09-01 is a Sunday.
    cells = month_grid(2024, 9, [], today=date(2024, 9, 1))
    assert cells[0] is not None and cells[0].day == 1
    assert len(cells) == 30


def test_cell_flags() -> None:
    tasks = [
        make_task(id="a", due_date="2024-03-05T21:45"),
        make_task(id="b", due_date="2024-03-20", completed=True),
        make_task(id="c", due_date="2024-04-05"),
        make_task(id="d", due_date="garbage"),
    ]

    cells = month_grid(
        2024,
        3,
        tasks,
        today=datetime(2024, 3, 10, 23, 59),
        selected_date=date(2024, 3, 20),
    )
    by_day = {c.day: c for c in cells if c is not None}

    assert {d for d, c in by_day.items() if c.has_tasks} == {5, 20}
    assert [d for d, c in by_day.items() if c.is_today] == [10]
    assert [d for d, c in by_day.items() if c.is_selected] == [20]
    assert by_day[5].date == date(2024, 3, 5)


def test_no_selection_when_selected_date_is_none_or_other_month() -> None:
    cells = month_grid(2024, 3, [], today=date(2024, 5, 1), selected_date=None)
    assert not any(c.is_selected or c.is_today for c in cells if c is not None)

    cells = month_grid(2024, 3, [], today=date(2024, 5, 1), selected_date=date(2024, 4, 20))
    assert not any(c.is_selected for c in cells if c is not None)


def test_month_navigation_and_title() -> None:
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 12, 1) == (2025, 1)
    assert shift_month(2024, 3, 0) == (2024, 3)
    assert shift_month(2024, 3, -15) == (2022, 12)
    assert month_title(2024, 2) == "February 2024"
