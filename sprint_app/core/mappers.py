"""Mapping raw tracker sprint JSON into SprintModel instances and tables."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import pandas as pd

from .column_config import get_columns
from .dates import parse_point
from .models import Schedule, SprintModel

logger = logging.getLogger(__name__)


def _parse_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        sprint_id = int(value)
    except (TypeError, ValueError):
        return None
    return sprint_id if sprint_id > 0 else None


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def map_sprint(raw: dict[str, Any]) -> SprintModel | None:
    sprint_id = _parse_id(raw.get("id"))
    if sprint_id is None:
        return None
    state = raw.get("state")
    warnings = raw.get("warnings") or []
    return SprintModel(
        id=sprint_id,
        display_name=_clean_text(raw.get("display_name")),
        # Carried verbatim; "OVERDUE" and "overdue" are both valid.
        state=str(state) if state is not None else None,
        planned_start=parse_point(raw.get("planned_start")),
        planned_end=parse_point(raw.get("planned_end")),
        plan_length=_clean_text(raw.get("plan_length")),
        actual_start=parse_point(raw.get("actual_start")),
        actual_end=parse_point(raw.get("actual_end")),
        computed_end=parse_point(raw.get("computed_end")),
        label=_clean_text(raw.get("label")),
        goal=_clean_text(raw.get("goal")),
        warnings=[str(w) for w in warnings if w],
    )


def map_sprints(raw_sprints: Iterable[dict[str, Any]]) -> list[SprintModel]:
    out: list[SprintModel] = []
    for raw in raw_sprints:
        if not isinstance(raw, dict):
            logger.debug("Ignoring non-object sprint payload: %r", raw)
            continue
        sprint = map_sprint(raw)
        if sprint is None:
            logger.debug("Ignoring sprint without a usable id: %r", raw.get("id"))
            continue
        out.append(sprint)
    return out


def schedule_to_dataframe(schedule: Schedule, columns: Iterable[str] | None = None) -> pd.DataFrame:
    rows = [entry.to_dict() for entries in schedule.values() for entry in entries]
    ordered = list(columns) if columns is not None else get_columns("schedule")
    if not rows:
        return pd.DataFrame(columns=ordered)
    df = pd.DataFrame(rows)
    display_cols = [col for col in ordered if col in df.columns]
    trailing = [col for col in df.columns if col not in display_cols]
    return df[display_cols + trailing]
