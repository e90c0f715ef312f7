"""Connection setup page: collect tracker server details and initialize SprintService."""

from __future__ import annotations

import logging

import streamlit as st

from sprint_app.app import register_page
from sprint_app.core.api_client import SprintAPI
from sprint_app.core.config import API_CACHE_TTL_SECONDS, DEFAULT_SERVER, TIMEZONE
from sprint_app.core.service import SprintService

logger = logging.getLogger(__name__)


@register_page("Setup / Connection")
def setup_page():
    st.title("Tracker Connection Setup")
    st.caption("Point the dashboard at a running tracker server (use secrets in production).")

    # Pre-fill from secrets if available (user can override)
    tracker_secrets = st.secrets.get("tracker", {})
    secret_server = tracker_secrets.get("TRACKER_SERVER") or st.secrets.get("TRACKER_SERVER")
    secret_token = tracker_secrets.get("TRACKER_TOKEN") or st.secrets.get("TRACKER_TOKEN")

    server = st.text_input(
        "Tracker Server URL",
        value=st.session_state.get("tracker_server") or secret_server or DEFAULT_SERVER,
    )
    token = st.text_input(
        "API Token (optional)",
        type="password",
        value=secret_token or "",
    )
    timezone = st.text_input(
        "Display timezone",
        value=st.session_state.get("tracker_timezone") or TIMEZONE,
    )
    ttl = st.number_input(
        "Client cache TTL (seconds)",
        min_value=0,
        max_value=3600,
        value=int(API_CACHE_TTL_SECONDS),
    )
    init_btn = st.button("Initialize Connection", type="primary")

    if init_btn:
        if not server:
            st.error("Server URL required.")
            return
        try:
            api = SprintAPI(server, token or None, cache_ttl=float(ttl))
            service = SprintService(api, timezone=timezone or None)
        except Exception as exc:  # pragma: no cover
            logger.error("Failed to initialize tracker client: %s", exc)
            st.error(f"Failed to initialize tracker client: {exc}")
            return
        st.session_state["tracker_server"] = server
        st.session_state["tracker_timezone"] = timezone
        st.session_state["sprint_service"] = service
        st.success("Connection initialized.")

    if "sprint_service" in st.session_state:
        st.info("SprintService ready.")
