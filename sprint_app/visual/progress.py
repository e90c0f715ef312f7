"""Fetch status banner for the sprint calendar page."""

from __future__ import annotations

import streamlit as st


class ProgressReporter:
    """Banner plus progress bar driven by SprintService progress hooks."""

    def __init__(self, title: str):
        self._box = st.container()
        self._box.info(title)
        self._status = self._box.empty()
        self._bar = self._box.progress(0.0)
        self._done = False

    def callback(self, message: str, current: int | None = None, total: int | None = None) -> None:
        if self._done:
            return
        self._status.write(message)
        # Service only reports counts once the sprint list is in.
        fraction = current / total if current is not None and total else 0.0
        self._bar.progress(min(max(fraction, 0.0), 1.0))

    def complete(self, message: str) -> None:
        if not self._done:
            self._bar.progress(1.0)
            self._box.success(message)
            self._done = True

    def error(self, message: str) -> None:
        if not self._done:
            self._box.error(message)
            self._done = True
