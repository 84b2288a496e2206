from dataclasses import dataclass
from datetime import date
from typing import Optional

import pytest

from core.models import GanttZoomLevel
from core.services.timeline import (
    ZOOM_ORDER,
    date_range_to_width,
    date_to_x,
    format_date_for_zoom,
    generate_timeline_units,
    get_project_date_range,
    get_unit_width,
    get_units_in_range,
    iter_timeline_units,
    pixels_per_day,
    start_of_period,
    timeline_width,
    zoom_in,
    zoom_out,
)


@dataclass
class _Dated:
    start_date: Optional[date] = None
    end_date: Optional[date] = None


def test_unit_widths_and_pixel_density():
    assert [get_unit_width(z) for z in ZOOM_ORDER] == [40, 120, 150, 200, 250]
    assert pixels_per_day(GanttZoomLevel.DAY) == 40
    assert pixels_per_day("week") == pytest.approx(120 / 7)
    assert pixels_per_day(GanttZoomLevel.MONTH) == 5
    assert pixels_per_day(GanttZoomLevel.YEAR) == pytest.approx(250 / 365)


@pytest.mark.parametrize(
    "zoom, expected",
    [
        (GanttZoomLevel.DAY, "05 Mar"),
        (GanttZoomLevel.WEEK, "05 Mar"),
        (GanttZoomLevel.MONTH, "Mar 24"),
        (GanttZoomLevel.QUARTER, "Q1 2024"),
        (GanttZoomLevel.YEAR, "2024"),
    ],
)
def test_format_date_for_zoom(zoom, expected):
    assert format_date_for_zoom(date(2024, 3, 5), zoom) == expected


def test_zoom_stepping_is_clamped():
    assert zoom_in(GanttZoomLevel.MONTH) == GanttZoomLevel.WEEK
    assert zoom_out(GanttZoomLevel.MONTH) == GanttZoomLevel.QUARTER
    assert zoom_in(GanttZoomLevel.DAY) == GanttZoomLevel.DAY
    assert zoom_out(GanttZoomLevel.YEAR) == GanttZoomLevel.YEAR


def test_day_units_cover_inclusive_range():
    units = generate_timeline_units(date(2024, 8, 15), date(2024, 8, 19), GanttZoomLevel.DAY, today=date(2024, 8, 16))

    assert [u.date for u in units] == [date(2024, 8, d) for d in range(15, 20)]
    assert all(u.width == 40 for u in units)
    assert [u.is_weekend for u in units] == [False, False, True, True, False]
    assert [u.is_today for u in units] == [False, True, False, False, False]
    assert units[0].label == "15 Aug"


def test_week_units_step_seven_days():
    units = generate_timeline_units(date(2024, 1, 1), date(2024, 1, 29), GanttZoomLevel.WEEK)

    assert [u.date for u in units] == [date(2024, 1, d) for d in (1, 8, 15, 22, 29)]
    assert all(u.width == pytest.approx(120) for u in units)


def test_month_units_do_not_drift_after_short_months():
    units = generate_timeline_units(date(2024, 1, 31), date(2024, 5, 31), GanttZoomLevel.MONTH)

    assert [u.date for u in units] == [
        date(2024, 1, 31),
        date(2024, 2, 29),
        date(2024, 3, 31),
        date(2024, 4, 30),
        date(2024, 5, 31),
    ]


def test_month_unit_width_uses_real_day_count():
    units = generate_timeline_units(date(2024, 2, 1), date(2024, 3, 1), GanttZoomLevel.MONTH)

    assert units[0].width == pytest.approx(29 * 5)
    assert units[1].width == pytest.approx(31 * 5)


def test_quarter_and_year_units():
    quarters = generate_timeline_units(date(2024, 1, 1), date(2024, 12, 31), GanttZoomLevel.QUARTER)
    years = generate_timeline_units(date(2023, 1, 1), date(2025, 6, 1), GanttZoomLevel.YEAR)

    assert [u.label for u in quarters] == ["Q1 2024", "Q2 2024", "Q3 2024", "Q4 2024"]
    assert [u.label for u in years] == ["2023", "2024", "2025"]


def test_empty_when_start_after_end():
    assert generate_timeline_units(date(2024, 2, 1), date(2024, 1, 1), GanttZoomLevel.DAY) == []


def test_iter_timeline_units_is_lazy_and_restartable():
    start, end = date(2024, 1, 1), date(2024, 1, 3)
    first = list(iter_timeline_units(start, end, GanttZoomLevel.DAY))
    second = list(iter_timeline_units(start, end, GanttZoomLevel.DAY))

    assert first == second
    assert len(first) == 3


@pytest.mark.parametrize("zoom", list(GanttZoomLevel))
def test_units_line_up_with_bar_offsets(zoom):
    start = start_of_period(date(2023, 11, 20), zoom)
    units = generate_timeline_units(start, date(2026, 3, 1), zoom)

    offset = 0.0
    for unit in units:
        assert date_to_x(unit.date, start, zoom) == pytest.approx(offset)
        offset += unit.width
    assert timeline_width(units) == pytest.approx(offset)


def test_date_range_to_width_is_inclusive():
    assert date_range_to_width(date(2024, 1, 1), date(2024, 1, 1), GanttZoomLevel.DAY) == 40
    assert date_range_to_width(date(2024, 1, 1), date(2024, 1, 7), GanttZoomLevel.WEEK) == pytest.approx(120)


def test_date_to_x_before_timeline_start_is_negative():
    assert date_to_x(date(2024, 1, 1), date(2024, 1, 3), GanttZoomLevel.DAY) == -80


def test_get_units_in_range():
    start, end = date(2024, 1, 15), date(2024, 4, 2)
    assert get_units_in_range(start, end, GanttZoomLevel.DAY) == 78
    assert get_units_in_range(start, end, GanttZoomLevel.WEEK) == 12
    assert get_units_in_range(start, end, GanttZoomLevel.MONTH) == 4
    assert get_units_in_range(start, end, GanttZoomLevel.QUARTER) == 2
    assert get_units_in_range(start, date(2026, 1, 1), GanttZoomLevel.YEAR) == 3


def test_project_date_range_pads_task_window():
    tasks = [
        _Dated(date(2024, 3, 10), date(2024, 3, 20)),
        _Dated(None, date(2024, 4, 2)),
        _Dated(date(2024, 3, 5), None),
    ]

    assert get_project_date_range(tasks) == (date(2024, 2, 27), date(2024, 4, 16))


def test_project_date_range_without_dates_uses_today_window():
    today = date(2024, 6, 1)

    assert get_project_date_range([_Dated()], today=today) == (date(2024, 5, 25), date(2024, 7, 15))
    assert get_project_date_range([], today=today) == (date(2024, 5, 25), date(2024, 7, 15))
