# src/study_planner/tasks/task_dates.py

"""
Date helpers shared by the query, calendar, progress and reminder modules.

All comparisons happen on naive datetimes in local time. Aware values are
converted to the local zone first, so "same day" always means equal
year/month/day components as the user sees them.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, date, datetime, time
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_timestamp(raw: Any) -> datetime | None:
    """
    Parse a stored date or date-time into a local naive datetime.

    Date-only strings mean local midnight. Returns None for anything that
    cannot be parsed (callers treat that as an invalid date).
    """
    if isinstance(raw, datetime):
        return to_local_naive(raw)
    if isinstance(raw, date):
        return datetime.combine(raw, time())
    if not isinstance(raw, str):
        return None

    s = raw.strip()
    if not s:
        return None
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError:
        return None
    return to_local_naive(parsed)


def parse_instant(raw: Any) -> datetime | None:
    """
    Like parse_timestamp, but returns an aware datetime for elapsed-time math.

    Naive values are taken as local time in the zone in effect on that date,
    so differences across a DST change count real hours.
    """
    if isinstance(raw, datetime):
        return raw if raw.tzinfo is not None else raw.astimezone()
    local = parse_timestamp(raw)
    return local.astimezone() if local is not None else None


def to_day(raw: Any) -> date | None:
    if isinstance(raw, date) and not isinstance(raw, datetime):
        return raw
    parsed = parse_timestamp(raw)
    return parsed.date() if parsed is not None else None


def same_day(a: Any, b: Any) -> bool:
    da = to_day(a)
    db = to_day(b)
    return da is not None and da == db


def utc_now() -> datetime:
    return datetime.now(UTC)


def iso_utc(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing Z."""
    if value.tzinfo is None:
        value = value.astimezone()
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def parse_minutes(raw: Any) -> int:
    """Leading integer of a duration value; 0 when there is none."""
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0
    if isinstance(raw, str):
        m = _LEADING_INT.match(raw)
        if m:
            return int(m.group(1))
    return 0
