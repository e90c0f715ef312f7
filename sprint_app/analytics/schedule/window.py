"""Resolve a sprint's absolute planned window from its record (pure functions)."""

from __future__ import annotations

import logging
from datetime import timedelta, tzinfo

from sprint_app.core.dates import to_day
from sprint_app.core.models import SprintModel, SprintWindow

from .duration import parse_duration_days

logger = logging.getLogger(__name__)


def normalize_window(sprint: SprintModel, tz: tzinfo | None = None) -> SprintWindow | None:
    """Resolve the planned window of ``sprint`` in calendar days.

    The end is taken from the first available source: ``planned_end``,
    ``computed_end``, ``plan_length`` (a closed interval of N days starting
    on the planned start), and finally the planned start itself. An end that
    precedes the start is clamped to the start.

    Returns None when the sprint has no planned start.
    """
    planned_start = to_day(sprint.planned_start, tz)
    if planned_start is None:
        return None

    planned_end = to_day(sprint.planned_end, tz)
    if planned_end is None:
        planned_end = to_day(sprint.computed_end, tz)
    if planned_end is None:
        days = parse_duration_days(sprint.plan_length)
        if days is not None:
            try:
                planned_end = planned_start + timedelta(days=days - 1)
            except OverflowError:
                logger.debug(
                    "Sprint %s plan length %r runs past the calendar; ignoring it",
                    sprint.id,
                    sprint.plan_length,
                )
    if planned_end is None:
        planned_end = planned_start

    if planned_end < planned_start:
        logger.debug(
            "Sprint %s ends (%s) before it starts (%s); clamping to a single day",
            sprint.id,
            planned_end,
            planned_start,
        )
        planned_end = planned_start

    return SprintWindow(
        planned_start=planned_start,
        planned_end=planned_end,
        actual_start=to_day(sprint.actual_start, tz),
        actual_end=to_day(sprint.actual_end, tz),
    )
