"""Sprint calendar page.

Fetches sprints from the tracker, projects them onto the visible month and
shows the timeline, the per-day schedule and a day detail table. Drawing
the month grid itself is left to the calendar front end.
"""

from __future__ import annotations

import logging
from datetime import date

import pandas as pd
import streamlit as st

from sprint_app.app import register_page
from sprint_app.core.config import SETTINGS
from sprint_app.core.service import SprintService
from sprint_app.features.sprint_calendar import build_calendar_context, month_grid_range, parse_month
from sprint_app.visual.charts import sprint_timeline
from sprint_app.visual.progress import ProgressReporter
from sprint_app.visual.tables import entries_to_frame, render_schedule_table

logger = logging.getLogger(__name__)


@register_page("Sprint Calendar")
def sprint_calendar_page():
    st.title("Sprint Calendar")
    st.caption("Planned sprint windows projected onto the visible month.")
    service: SprintService | None = st.session_state.get("sprint_service")
    if service is None:
        st.warning("Initialize connection on Setup page first.")
        return

    month_text = st.text_input("Month (YYYY-MM)", value=date.today().strftime("%Y-%m"))
    try:
        month_start = parse_month(month_text)
    except ValueError as exc:
        st.error(str(exc))
        return
    range_start, range_end = month_grid_range(month_start)
    st.caption(f"Visible range: {range_start.isoformat()} → {range_end.isoformat()}")

    if st.button("Fetch Sprints", type="primary"):
        reporter = ProgressReporter("Fetching sprints")
        try:
            st.session_state["sprints"] = service.fetch_sprints(progress=reporter.callback, fresh=True)
            reporter.complete(f"Loaded {len(st.session_state['sprints'])} sprint(s).")
        except RuntimeError as exc:
            logger.error("Tracker API error fetching sprints: %s", exc)
            reporter.error(f"Failed to fetch sprints: {exc}")
            return

    sprints = st.session_state.get("sprints")
    if not sprints:
        st.info("No sprints loaded yet.")
        return

    selected = st.session_state.get("calendar_day")
    ctx = build_calendar_context(sprints, range_start, range_end, selected_day=selected, tz=service.tz)

    if ctx.unschedulable:
        names = ", ".join(s.display_name or f"Sprint {s.id}" for s in ctx.unschedulable)
        st.warning(f"No displayable schedule (missing planned start): {names}")

    chart = sprint_timeline(ctx.schedule)
    if chart is None:
        st.info("No sprints overlap the visible range.")
        return
    st.altair_chart(chart, use_container_width=True)

    st.markdown("---")
    st.subheader("Day Detail")
    day_keys = list(ctx.schedule.keys())
    if ctx.selected_day not in ctx.schedule:
        # Month changed under the selection; the widget rerun picks up the new day.
        st.session_state["calendar_day"] = day_keys[0]
        ctx.day_entries = list(ctx.schedule[day_keys[0]])
    st.selectbox("Day", day_keys, key="calendar_day")
    render_schedule_table(entries_to_frame(ctx.day_entries), column_set="day_detail")

    st.markdown("---")
    st.subheader("Daily Schedule")
    counts = pd.DataFrame({"day": list(ctx.day_counts), "entries": list(ctx.day_counts.values())})
    st.bar_chart(counts, x="day", y="entries", height=160)
    render_schedule_table(ctx.frame)
    csv = ctx.frame.to_csv(index=False).encode(SETTINGS.download_encoding)
    st.download_button(
        "Download Schedule CSV",
        data=csv,
        file_name=f"sprint_schedule_{month_start.strftime('%Y-%m')}.csv",
        mime="text/csv",
    )
