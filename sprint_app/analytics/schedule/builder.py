"""Project sprint windows onto a visible calendar range."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import tzinfo

from sprint_app.core.dates import iter_days, to_day
from sprint_app.core.models import Schedule, ScheduleEntry, SprintModel, SprintWindow

from .window import normalize_window

logger = logging.getLogger(__name__)


def label_for_sprint(sprint: SprintModel) -> str:
    return sprint.display_name or sprint.label or f"Sprint {sprint.id}"


def build_schedule(
    sprints: Iterable[SprintModel] | None,
    range_start,
    range_end,
    *,
    tz: tzinfo | None = None,
) -> Schedule:
    """Build the day-key -> entries table for ``[range_start, range_end]``.

    Flags (start/end, actual start/end, dimming) are derived from each
    sprint's absolute window, never from the clipped visible span, so a
    sprint that began before the range reports ``is_start=False`` on the
    first visible day. Per-day lists keep the input order of ``sprints``.
    Days without any sprint are absent from the result.

    Sprints without a planned start, or whose window misses the range, are
    dropped silently; an inverted or unparseable range yields ``{}``.
    """
    schedule: Schedule = {}
    start = to_day(range_start, tz)
    end = to_day(range_end, tz)
    if start is None or end is None or start > end or not sprints:
        return schedule

    for sprint in sprints:
        window = normalize_window(sprint, tz)
        if window is None:
            logger.debug("Sprint %s has no planned start; skipping", sprint.id)
            continue
        visible_start = max(window.planned_start, start)
        visible_end = min(window.planned_end, end)
        if visible_start > visible_end:
            continue
        label = label_for_sprint(sprint)
        for day in iter_days(visible_start, visible_end):
            entry = _make_entry(sprint, window, day, label)
            schedule.setdefault(day.isoformat(), []).append(entry)
    # Day keys sort chronologically as strings.
    return dict(sorted(schedule.items()))


def _make_entry(sprint: SprintModel, window: SprintWindow, day, label: str) -> ScheduleEntry:
    actual_start = window.actual_start
    actual_end = window.actual_end
    return ScheduleEntry(
        id=sprint.id,
        label=label,
        state=sprint.state,
        day=day,
        is_start=day == window.planned_start,
        is_end=day == window.planned_end,
        start_date=window.planned_start,
        end_date=window.planned_end,
        actual_start_date=actual_start,
        actual_end_date=actual_end,
        is_actual_start=actual_start is not None and day == actual_start,
        is_actual_end=actual_end is not None and day == actual_end,
        before_actual_start=actual_start is not None and day < actual_start,
        after_actual_end=actual_end is not None and day > actual_end,
    )
