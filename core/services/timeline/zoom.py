from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Union

from core.domain.enums import GanttZoomLevel
from core.services.timeline.dates import (
    DateLike,
    start_of_day,
    start_of_month,
    start_of_quarter,
    start_of_week,
    start_of_year,
)

ZoomLike = Union[GanttZoomLevel, str]


@dataclass(frozen=True)
class ZoomSpec:
    level: GanttZoomLevel
    unit_width: int
    # Days one header unit stands for in pixel math. Month/quarter/year use
    # fixed 30/91/365-day approximations instead of real calendar lengths.
    approx_days: int

    @property
    def pixels_per_day(self) -> float:
        return self.unit_width / self.approx_days


ZOOM_SPECS: Dict[GanttZoomLevel, ZoomSpec] = {
    GanttZoomLevel.DAY: ZoomSpec(GanttZoomLevel.DAY, unit_width=40, approx_days=1),
    GanttZoomLevel.WEEK: ZoomSpec(GanttZoomLevel.WEEK, unit_width=120, approx_days=7),
    GanttZoomLevel.MONTH: ZoomSpec(GanttZoomLevel.MONTH, unit_width=150, approx_days=30),
    GanttZoomLevel.QUARTER: ZoomSpec(GanttZoomLevel.QUARTER, unit_width=200, approx_days=91),
    GanttZoomLevel.YEAR: ZoomSpec(GanttZoomLevel.YEAR, unit_width=250, approx_days=365),
}

ZOOM_ORDER: tuple[GanttZoomLevel, ...] = (
    GanttZoomLevel.DAY,
    GanttZoomLevel.WEEK,
    GanttZoomLevel.MONTH,
    GanttZoomLevel.QUARTER,
    GanttZoomLevel.YEAR,
)

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def as_zoom_level(zoom: ZoomLike) -> GanttZoomLevel:
    return zoom if isinstance(zoom, GanttZoomLevel) else GanttZoomLevel(str(zoom).lower())


def get_zoom_spec(zoom: ZoomLike) -> ZoomSpec:
    return ZOOM_SPECS[as_zoom_level(zoom)]


def get_unit_width(zoom: ZoomLike) -> int:
    return get_zoom_spec(zoom).unit_width


def pixels_per_day(zoom: ZoomLike) -> float:
    return get_zoom_spec(zoom).pixels_per_day


def quarter_of(value: date) -> int:
    return (value.month - 1) // 3 + 1


def format_date_for_zoom(value: date, zoom: ZoomLike) -> str:
    """Header label for a unit starting at ``value``."""
    level = as_zoom_level(zoom)
    month = _MONTH_ABBR[value.month - 1]
    if level in (GanttZoomLevel.DAY, GanttZoomLevel.WEEK):
        return f"{value.day:02d} {month}"
    if level == GanttZoomLevel.MONTH:
        return f"{month} {value.year % 100:02d}"
    if level == GanttZoomLevel.QUARTER:
        return f"Q{quarter_of(value)} {value.year}"
    return str(value.year)


def start_of_period(value: DateLike, zoom: ZoomLike) -> DateLike:
    level = as_zoom_level(zoom)
    if level == GanttZoomLevel.DAY:
        return start_of_day(value)
    if level == GanttZoomLevel.WEEK:
        return start_of_week(value)
    if level == GanttZoomLevel.MONTH:
        return start_of_month(value)
    if level == GanttZoomLevel.QUARTER:
        return start_of_quarter(value)
    return start_of_year(value)


def zoom_in(zoom: ZoomLike) -> GanttZoomLevel:
    """Next finer level; DAY stays DAY."""
    index = ZOOM_ORDER.index(as_zoom_level(zoom))
    return ZOOM_ORDER[max(0, index - 1)]


def zoom_out(zoom: ZoomLike) -> GanttZoomLevel:
    """Next coarser level; YEAR stays YEAR."""
    index = ZOOM_ORDER.index(as_zoom_level(zoom))
    return ZOOM_ORDER[min(len(ZOOM_ORDER) - 1, index + 1)]


__all__ = [
    "ZoomLike",
    "ZoomSpec",
    "ZOOM_SPECS",
    "ZOOM_ORDER",
    "as_zoom_level",
    "get_zoom_spec",
    "get_unit_width",
    "pixels_per_day",
    "quarter_of",
    "format_date_for_zoom",
    "start_of_period",
    "zoom_in",
    "zoom_out",
]
