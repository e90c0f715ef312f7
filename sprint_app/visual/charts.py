"""Chart builders (Altair) for sprint timelines."""

from __future__ import annotations

import altair as alt
import pandas as pd

from sprint_app.core.models import Schedule
from sprint_app.features.sprint_calendar import sprint_state_color


def _timeline_frame(schedule: Schedule) -> pd.DataFrame:
    spans: dict[int, dict] = {}
    for key, entries in schedule.items():
        for entry in entries:
            span = spans.get(entry.id)
            if span is None:
                spans[entry.id] = {
                    "id": entry.id,
                    "label": entry.label,
                    "state": entry.state or "",
                    "color": sprint_state_color(entry.state),
                    "visible_start": key,
                    "visible_end": key,
                    "start_date": entry.start_date.isoformat(),
                    "end_date": entry.end_date.isoformat(),
                }
            else:
                span["visible_end"] = max(span["visible_end"], key)
                span["visible_start"] = min(span["visible_start"], key)
    if not spans:
        return pd.DataFrame()
    df = pd.DataFrame(list(spans.values()))
    df["visible_start"] = pd.to_datetime(df["visible_start"])
    # Bars cover whole days, so the last visible day extends to the next midnight.
    df["visible_end"] = pd.to_datetime(df["visible_end"]) + pd.Timedelta(days=1)
    return df


def sprint_timeline(schedule: Schedule):
    """Horizontal bar per sprint covering its visible span; None when empty."""
    df = _timeline_frame(schedule)
    if df.empty:
        return None
    chart = (
        alt.Chart(df)
        .mark_bar(cornerRadius=3)
        .encode(
            x=alt.X("visible_start:T", title="Date"),
            x2="visible_end:T",
            y=alt.Y("label:N", title="Sprint", sort=list(df["label"])),
            color=alt.Color("color:N", scale=None, legend=None),
            tooltip=[
                alt.Tooltip("label:N", title="Sprint"),
                alt.Tooltip("state:N", title="State"),
                alt.Tooltip("start_date:N", title="Planned Start"),
                alt.Tooltip("end_date:N", title="Planned End"),
            ],
        )
        .properties(height=max(80, 28 * len(df)))
    )
    return chart
