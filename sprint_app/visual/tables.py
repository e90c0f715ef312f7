"""Reusable table helpers for Streamlit rendering."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from sprint_app.core.column_config import get_columns
from sprint_app.core.config import SETTINGS
from sprint_app.core.models import ScheduleEntry

from .column_metadata import apply_column_metadata


def prepare_schedule_table(
    df: pd.DataFrame,
    *,
    column_set: str = "schedule",
    extra_columns: list[str] | None = None,
) -> tuple[pd.DataFrame, list[str]]:
    if df.empty:
        return df, []

    canonical = get_columns(column_set) or []
    display_cols: list[str] = [col for col in canonical if col in df.columns]

    if extra_columns:
        for col in extra_columns:
            if col in df.columns and col not in display_cols:
                display_cols.append(col)

    if not display_cols:
        display_cols = list(df.columns)

    return df, display_cols


def entries_to_frame(entries: list[ScheduleEntry]) -> pd.DataFrame:
    return pd.DataFrame([entry.to_dict() for entry in entries])


def render_schedule_table(df: pd.DataFrame, *, column_set: str = "schedule", limit: int | None = None):
    table, cols = prepare_schedule_table(df, column_set=column_set)
    if not cols:
        st.info("No sprint entries to show.")
        return
    cfg = apply_column_metadata(cols)
    st.dataframe(
        table[cols].head(limit or SETTINGS.max_table_rows),
        hide_index=True,
        column_config=cfg,
    )
