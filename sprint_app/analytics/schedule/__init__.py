"""Sprint schedule projection: duration parsing, window resolution, day table."""

from sprint_app.analytics.schedule.builder import build_schedule, label_for_sprint
from sprint_app.analytics.schedule.duration import parse_duration_days
from sprint_app.analytics.schedule.window import normalize_window

__all__ = [
    "build_schedule",
    "label_for_sprint",
    "normalize_window",
    "parse_duration_days",
]
