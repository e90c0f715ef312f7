"""Application entry point: page registry and router."""

from __future__ import annotations

import streamlit as st

PAGES = {}

PREFERRED_ORDER = [
    "Sprint Calendar",
    "Setup / Connection",
]


def register_page(label):
    def decorator(func):
        PAGES[label] = func
        return func

    return decorator


def ordered_pages() -> list[str]:
    pages = list(PAGES.keys())
    ordered = [name for name in PREFERRED_ORDER if name in pages]
    trailing = sorted(name for name in pages if name not in PREFERRED_ORDER)
    return ordered + trailing


def main():
    st.sidebar.title("Sprint Calendar")
    pages = ordered_pages()
    if not pages:
        st.write("No pages registered yet.")
        return
    # Without a service yet, land on setup.
    if "Setup / Connection" in pages and "sprint_service" not in st.session_state:
        default = pages.index("Setup / Connection")
    else:
        default = 0
    page = st.sidebar.selectbox("Page", pages, index=default)
    PAGES[page]()


if __name__ == "__main__":
    main()
