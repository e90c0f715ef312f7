"""Pure helpers to build the sprint calendar context for testing (no Streamlit)."""

from __future__ import annotations

import calendar
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, tzinfo

import pandas as pd

from sprint_app.analytics.schedule import build_schedule, normalize_window
from sprint_app.core.config import DEFAULT_STATE_COLOR, MONTH_PARAM_FORMAT, STATE_COLORS, WEEK_START
from sprint_app.core.dates import to_day_key
from sprint_app.core.mappers import schedule_to_dataframe
from sprint_app.core.models import Schedule, ScheduleEntry, SprintModel


@dataclass(slots=True)
class SprintCalendarContext:
    range_start: date
    range_end: date
    schedule: Schedule
    frame: pd.DataFrame
    day_counts: dict[str, int]
    selected_day: str | None = None
    day_entries: list[ScheduleEntry] = field(default_factory=list)
    # Sprints without a planned start: nothing can ever be drawn for them.
    unschedulable: list[SprintModel] = field(default_factory=list)
    # Sprints with a window that does not touch the visible range.
    out_of_range: list[SprintModel] = field(default_factory=list)

    @property
    def unscheduled(self) -> list[SprintModel]:
        return [*self.unschedulable, *self.out_of_range]


def parse_month(text: str) -> date:
    """Parse a ``YYYY-MM`` month parameter into the first day of that month."""
    try:
        parsed = datetime.strptime(str(text).strip(), MONTH_PARAM_FORMAT)
    except ValueError as exc:
        raise ValueError(f"Invalid month (expected YYYY-MM): {text!r}") from exc
    return parsed.date().replace(day=1)


def month_grid_range(month_start: date, week_start: int = WEEK_START) -> tuple[date, date]:
    """Visible range of a month grid made of whole weeks beginning on ``week_start``."""
    first = month_start.replace(day=1)
    last = first.replace(day=calendar.monthrange(first.year, first.month)[1])
    lead = (first.weekday() - week_start) % 7
    week_end = (week_start - 1) % 7
    trail = (week_end - last.weekday()) % 7
    return first - timedelta(days=lead), last + timedelta(days=trail)


def sprint_state_color(state: str | None) -> str:
    if not state:
        return DEFAULT_STATE_COLOR
    return STATE_COLORS.get(str(state).strip().lower(), DEFAULT_STATE_COLOR)


def build_calendar_context(
    sprints: Sequence[SprintModel],
    range_start: date,
    range_end: date,
    *,
    selected_day=None,
    tz: tzinfo | None = None,
) -> SprintCalendarContext:
    schedule = build_schedule(sprints, range_start, range_end, tz=tz)
    frame = schedule_to_dataframe(schedule)
    day_counts = {key: len(entries) for key, entries in schedule.items()}

    selected_key = to_day_key(selected_day, tz) if selected_day is not None else None
    day_entries = list(schedule.get(selected_key, [])) if selected_key else []

    scheduled_ids = {entry.id for entries in schedule.values() for entry in entries}
    unschedulable: list[SprintModel] = []
    out_of_range: list[SprintModel] = []
    for sprint in sprints:
        if sprint.id in scheduled_ids:
            continue
        if normalize_window(sprint, tz) is None:
            unschedulable.append(sprint)
        else:
            out_of_range.append(sprint)

    return SprintCalendarContext(
        range_start=range_start,
        range_end=range_end,
        schedule=schedule,
        frame=frame,
        day_counts=day_counts,
        selected_day=selected_key,
        day_entries=day_entries,
        unschedulable=unschedulable,
        out_of_range=out_of_range,
    )
