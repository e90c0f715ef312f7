"""Central configuration, constants, palette, and shared column definitions."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

# =============================================================================
# Tracker Connection Settings
# =============================================================================
DEFAULT_SERVER = os.environ.get("SPRINT_CALENDAR_SERVER", "http://localhost:8080")
SPRINT_LIST_PATH = "/api/sprints/list"
API_CACHE_TTL_SECONDS: float = 300.0
API_TIMEOUT_SECONDS: float = 15.0

# Day keys ("YYYY-MM-DD") are computed in this zone. Date-only values from the
# tracker are calendar days already and are never shifted.
TIMEZONE = os.environ.get("SPRINT_CALENDAR_TZ", "UTC")

# =============================================================================
# Duration Shorthand
# =============================================================================
# Unit token -> number of days. Keys are lowercase; matching is case-insensitive.
DURATION_UNIT_DAYS: dict[str, int] = {
    "d": 1,
    "day": 1,
    "days": 1,
    "w": 7,
    "week": 7,
    "weeks": 7,
}

# =============================================================================
# Calendar Defaults
# =============================================================================
WEEK_START: int = 6  # datetime.weekday() value; 6 = Sunday
MONTH_PARAM_FORMAT = "%Y-%m"

# =============================================================================
# Sprint State Palette
# =============================================================================
# Lookup is case-insensitive ("OVERDUE" and "overdue" share a colour); the
# state string carried on entries is never rewritten.
STATE_COLORS: dict[str, str] = {
    "pending": "#6c757d",
    "active": "#1f77b4",
    "overdue": "#d62728",
    "complete": "#2ca02c",
}
DEFAULT_STATE_COLOR = "#9467bd"

# =============================================================================
# Schedule Table Columns
# =============================================================================
SCHEDULE_COLUMNS: Sequence[str] = (
    "day",
    "id",
    "label",
    "state",
    "start_date",
    "end_date",
    "is_start",
    "is_end",
    "actual_start_date",
    "actual_end_date",
    "is_actual_start",
    "is_actual_end",
    "before_actual_start",
    "after_actual_end",
)

DAY_DETAIL_COLUMNS: Sequence[str] = (
    "label",
    "state",
    "start_date",
    "end_date",
    "actual_start_date",
    "actual_end_date",
)


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"


SETTINGS = AppSettings()
