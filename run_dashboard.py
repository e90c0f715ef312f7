"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_dashboard.py

Automatically imports every module in ``sprint_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

import logging
from importlib import import_module
from pathlib import Path

import streamlit as st

from sprint_app.app import main

logger = logging.getLogger(__name__)

st.set_page_config(layout="wide")


def _auto_init_sprint_service():
    """Initialize the tracker service from Streamlit secrets if available."""
    if "sprint_service" in st.session_state:
        return

    # Try to get secrets from a [tracker] section, fall back to top-level
    tracker_secrets = st.secrets.get("tracker", {})
    server = tracker_secrets.get("TRACKER_SERVER") or st.secrets.get("TRACKER_SERVER")
    token = tracker_secrets.get("TRACKER_TOKEN") or st.secrets.get("TRACKER_TOKEN")
    timezone = tracker_secrets.get("TRACKER_TIMEZONE") or st.secrets.get("TRACKER_TIMEZONE")

    if not server:
        st.sidebar.warning("Tracker secrets not found. Please use the Setup page.")
        return
    try:
        from sprint_app.core.api_client import SprintAPI
        from sprint_app.core.service import SprintService

        st.session_state["tracker_server"] = server
        st.session_state["sprint_service"] = SprintService(SprintAPI(server, token), timezone=timezone)
        st.sidebar.success("Tracker connection configured.")
    except Exception as e:
        logger.error("Tracker setup from secrets failed: %s", e)
        st.sidebar.error(f"Tracker setup failed: {e}")
        st.session_state.pop("sprint_service", None)


_auto_init_sprint_service()

PAGES_DIR = Path(__file__).parent / "sprint_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"sprint_app.pages.{py.stem}"
    try:
        import_module(mod_name)
    except Exception as e:  # pragma: no cover - defensive
        logger.error("Failed importing page %s: %s", mod_name, e)

if __name__ == "__main__":
    main()
