"""
Calendar helpers shared by the Gantt timeline and the schedule projector.

Every function accepts a ``date`` or a naive/aware ``datetime`` and returns the
same kind it was given. Values are treated as local calendar dates; nothing
here validates its input.
"""
from __future__ import annotations

import calendar
import math
from datetime import date, datetime, timedelta
from typing import Optional, TypeVar

DateLike = TypeVar("DateLike", date, datetime)

SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def calendar_day(value: date) -> date:
    """Strip the time part, if any."""
    return date(value.year, value.month, value.day)


def days_between(start: date, end: date) -> int:
    """Days from ``start`` to ``end``, rounded half-up to the nearest whole day."""
    if not isinstance(start, datetime) and not isinstance(end, datetime):
        return (end - start).days
    seconds = (_as_datetime(end) - _as_datetime(start)).total_seconds()
    return math.floor(seconds / SECONDS_PER_DAY + 0.5)


def add_days(value: DateLike, days: int) -> DateLike:
    return value + timedelta(days=days)


def add_months(value: DateLike, months: int) -> DateLike:
    """Shift by whole months, clamping the day to the target month's length."""
    total = value.month - 1 + months
    year = value.year + total // 12
    month = total % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def start_of_day(value: DateLike) -> DateLike:
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return value


def start_of_week(value: DateLike) -> DateLike:
    """Monday of the containing week."""
    return start_of_day(value) - timedelta(days=value.weekday())


def start_of_month(value: DateLike) -> DateLike:
    return start_of_day(value.replace(day=1))


def start_of_quarter(value: DateLike) -> DateLike:
    first_month = value.month - (value.month - 1) % 3
    return start_of_day(value.replace(month=first_month, day=1))


def start_of_year(value: DateLike) -> DateLike:
    return start_of_day(value.replace(month=1, day=1))


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5


def is_today(value: date, today: Optional[date] = None) -> bool:
    reference = today if today is not None else date.today()
    return calendar_day(value) == calendar_day(reference)


__all__ = [
    "DateLike",
    "calendar_day",
    "days_between",
    "add_days",
    "add_months",
    "start_of_day",
    "start_of_week",
    "start_of_month",
    "start_of_quarter",
    "start_of_year",
    "is_weekend",
    "is_today",
]
