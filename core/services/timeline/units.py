"""
Gantt header units and the date <-> pixel geometry behind the bars.

Unit widths and bar offsets share one rule (days * pixels_per_day), so a bar
drawn at ``date_to_x(d)`` lines up with the unit whose date is ``d``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Optional

from core.domain.enums import GanttZoomLevel
from core.services.timeline.dates import (
    DateLike,
    add_days,
    add_months,
    days_between,
    is_today,
    is_weekend,
)
from core.services.timeline.zoom import (
    ZoomLike,
    as_zoom_level,
    format_date_for_zoom,
    pixels_per_day,
)

DEFAULT_WINDOW_DAYS = 30
LEAD_PADDING_DAYS = 7
TRAIL_PADDING_DAYS = 14


@dataclass(frozen=True)
class TimelineUnit:
    date: date
    label: str
    width: float
    is_weekend: bool
    is_today: bool


def unit_at(start: DateLike, index: int, zoom: ZoomLike) -> DateLike:
    """Date of the ``index``-th unit counted from ``start``."""
    level = as_zoom_level(zoom)
    if level == GanttZoomLevel.DAY:
        return add_days(start, index)
    if level == GanttZoomLevel.WEEK:
        return add_days(start, 7 * index)
    if level == GanttZoomLevel.MONTH:
        return add_months(start, index)
    if level == GanttZoomLevel.QUARTER:
        return add_months(start, 3 * index)
    return add_months(start, 12 * index)


def iter_timeline_units(
    start: date,
    end: date,
    zoom: ZoomLike,
    *,
    today: Optional[date] = None,
) -> Iterator[TimelineUnit]:
    ppd = pixels_per_day(zoom)
    index = 0
    current = start
    while current <= end:
        following = unit_at(start, index + 1, zoom)
        yield TimelineUnit(
            date=current,
            label=format_date_for_zoom(current, zoom),
            width=days_between(current, following) * ppd,
            is_weekend=is_weekend(current),
            is_today=is_today(current, today),
        )
        index += 1
        current = following


def generate_timeline_units(
    start: date,
    end: date,
    zoom: ZoomLike,
    *,
    today: Optional[date] = None,
) -> list[TimelineUnit]:
    return list(iter_timeline_units(start, end, zoom, today=today))


def timeline_width(units: Iterable[TimelineUnit]) -> float:
    return sum(unit.width for unit in units)


def date_to_x(value: date, timeline_start: date, zoom: ZoomLike) -> float:
    """Horizontal offset of ``value`` from the left edge of the timeline."""
    return days_between(timeline_start, value) * pixels_per_day(zoom)


def date_range_to_width(start: date, end: date, zoom: ZoomLike) -> float:
    """Bar width for an inclusive [start, end] span."""
    return (days_between(start, end) + 1) * pixels_per_day(zoom)


def get_units_in_range(start: date, end: date, zoom: ZoomLike) -> int:
    """Number of zoom periods the range touches."""
    level = as_zoom_level(zoom)
    if level == GanttZoomLevel.DAY:
        return days_between(start, end)
    if level == GanttZoomLevel.WEEK:
        return math.ceil(days_between(start, end) / 7)
    if level == GanttZoomLevel.MONTH:
        return (end.year - start.year) * 12 + (end.month - start.month) + 1
    if level == GanttZoomLevel.QUARTER:
        start_q = (start.month - 1) // 3
        end_q = (end.month - 1) // 3
        return (end.year - start.year) * 4 + (end_q - start_q) + 1
    return end.year - start.year + 1


def get_project_date_range(tasks: Iterable[object], today: Optional[date] = None) -> tuple[date, date]:
    """
    Visible window for a set of tasks: earliest to latest start/end date,
    padded by a week before and two weeks after. Without any dated task the
    window is the next thirty days from ``today``.
    """
    dates: list[date] = []
    for task in tasks:
        for attr in ("start_date", "end_date"):
            value = getattr(task, attr, None)
            if value is not None:
                dates.append(value)

    if dates:
        earliest, latest = min(dates), max(dates)
    else:
        base = today if today is not None else date.today()
        earliest, latest = base, add_days(base, DEFAULT_WINDOW_DAYS)

    return add_days(earliest, -LEAD_PADDING_DAYS), add_days(latest, TRAIL_PADDING_DAYS)


__all__ = [
    "TimelineUnit",
    "unit_at",
    "iter_timeline_units",
    "generate_timeline_units",
    "timeline_width",
    "date_to_x",
    "date_range_to_width",
    "get_units_in_range",
    "get_project_date_range",
]
