"""Sprint calendar feature module: month ranges, schedule context, palette."""

from sprint_app.features.sprint_calendar.context import (
    SprintCalendarContext,
    build_calendar_context,
    month_grid_range,
    parse_month,
    sprint_state_color,
)

__all__ = [
    "SprintCalendarContext",
    "build_calendar_context",
    "month_grid_range",
    "parse_month",
    "sprint_state_color",
]
