"""Central column metadata and helpers for schedule table rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import streamlit as st

# Mapping of raw column keys to (label, help text, format key)
# format key: "int" -> integer, "bool" -> checkbox, None -> default text column
COLUMN_METADATA: dict[str, tuple[str, str, str | None]] = {
    "day": ("Day", "Calendar day (YYYY-MM-DD) the entry is drawn on.", None),
    "id": ("Sprint ID", "Tracker identifier of the sprint.", "int"),
    "label": ("Sprint", "Sprint display name.", None),
    "state": ("State", "Sprint state as reported by the tracker.", None),
    "start_date": ("Planned Start", "First day of the planned window.", None),
    "end_date": ("Planned End", "Last day of the planned window (resolved from end, projection or plan length).", None),
    "actual_start_date": ("Actual Start", "Day the sprint actually started, if recorded.", None),
    "actual_end_date": ("Actual End", "Day the sprint actually ended, if recorded.", None),
    "is_start": ("Starts", "The planned window begins on this day.", "bool"),
    "is_end": ("Ends", "The planned window ends on this day.", "bool"),
    "is_actual_start": ("Actual Start Day", "The sprint actually started on this day.", "bool"),
    "is_actual_end": ("Actual End Day", "The sprint actually ended on this day.", "bool"),
    "before_actual_start": ("Before Start", "Planned day before the sprint actually started.", "bool"),
    "after_actual_end": ("After End", "Planned day after the sprint actually ended.", "bool"),
    "entries": ("Sprints", "Number of sprints drawn on the day.", "int"),
}


def apply_column_metadata(
    columns: Iterable[str],
    existing: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return a column_config dictionary with human labels and hover help."""

    config: dict[str, Any] = dict(existing or {})
    for col in columns:
        if col in config:
            continue
        meta = COLUMN_METADATA.get(col)
        if not meta:
            continue
        label, help_text, fmt = meta
        if fmt == "int":
            config[col] = st.column_config.NumberColumn(label, help=help_text, format="%d")
        elif fmt == "bool":
            config[col] = st.column_config.CheckboxColumn(label, help=help_text)
        else:
            config[col] = st.column_config.Column(label, help=help_text)
    return config
