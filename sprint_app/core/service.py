"""SprintService: orchestrates fetching, mapping, and schedule projection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date

from sprint_app.analytics.schedule import build_schedule

from .api_client import SprintAPI
from .dates import display_timezone
from .mappers import map_sprints
from .models import Schedule, SprintModel

ProgressCallback = Callable[[str, int | None, int | None], None]

logger = logging.getLogger(__name__)


class SprintService:
    def __init__(self, api: SprintAPI, *, timezone: str | None = None):
        self.api = api
        self._tz = display_timezone(timezone)

    @property
    def tz(self):
        return self._tz

    def fetch_sprints(
        self,
        *,
        progress: ProgressCallback | None = None,
        fresh: bool = False,
    ) -> list[SprintModel]:
        if fresh and hasattr(self.api, "clear_cache"):
            self.api.clear_cache()
            if progress:
                progress("Preparing fresh sprint data", None, None)
        if progress:
            progress("Querying sprints", None, None)
        raw = self.api.list_sprints()
        sprints = map_sprints(raw)
        skipped = len(raw) - len(sprints)
        if skipped:
            logger.warning("Skipped %s sprint record(s) without a usable id", skipped)
        if progress:
            progress(f"Loaded {len(sprints)} sprint(s)", len(sprints), len(sprints))
        return sprints

    def build_schedule(
        self,
        sprints: Sequence[SprintModel],
        range_start: date,
        range_end: date,
    ) -> Schedule:
        return build_schedule(sprints, range_start, range_end, tz=self._tz)

    def fetch_schedule(
        self,
        range_start: date,
        range_end: date,
        *,
        progress: ProgressCallback | None = None,
        fresh: bool = False,
    ) -> tuple[list[SprintModel], Schedule]:
        sprints = self.fetch_sprints(progress=progress, fresh=fresh)
        if progress:
            progress("Projecting sprints onto the calendar", None, None)
        return sprints, self.build_schedule(sprints, range_start, range_end)
