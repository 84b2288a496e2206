from core.services.timeline.dates import (
    add_days,
    add_months,
    calendar_day,
    days_between,
    is_today,
    is_weekend,
    start_of_day,
    start_of_month,
    start_of_quarter,
    start_of_week,
    start_of_year,
)
from core.services.timeline.units import (
    TimelineUnit,
    date_range_to_width,
    date_to_x,
    generate_timeline_units,
    get_project_date_range,
    get_units_in_range,
    iter_timeline_units,
    timeline_width,
    unit_at,
)
from core.services.timeline.zoom import (
    ZOOM_ORDER,
    ZOOM_SPECS,
    ZoomSpec,
    format_date_for_zoom,
    get_unit_width,
    get_zoom_spec,
    pixels_per_day,
    start_of_period,
    zoom_in,
    zoom_out,
)

__all__ = [
    "add_days",
    "add_months",
    "calendar_day",
    "days_between",
    "is_today",
    "is_weekend",
    "start_of_day",
    "start_of_month",
    "start_of_quarter",
    "start_of_week",
    "start_of_year",
    "TimelineUnit",
    "date_range_to_width",
    "date_to_x",
    "generate_timeline_units",
    "get_project_date_range",
    "get_units_in_range",
    "iter_timeline_units",
    "timeline_width",
    "unit_at",
    "ZOOM_ORDER",
    "ZOOM_SPECS",
    "ZoomSpec",
    "format_date_for_zoom",
    "get_unit_width",
    "get_zoom_spec",
    "pixels_per_day",
    "start_of_period",
    "zoom_in",
    "zoom_out",
]
