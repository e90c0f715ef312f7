"""Domain data models for sprint records and their calendar projection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

# A point in time as delivered by the tracker: full timestamp or bare calendar day.
PointInTime = datetime | date


@dataclass(slots=True)
class SprintModel:
    id: int
    display_name: str | None
    state: str | None
    planned_start: PointInTime | None = None
    planned_end: PointInTime | None = None
    plan_length: str | None = None
    actual_start: PointInTime | None = None
    actual_end: PointInTime | None = None
    computed_end: PointInTime | None = None
    label: str | None = None
    goal: str | None = None
    warnings: list[str] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class SprintWindow:
    planned_start: date
    planned_end: date
    actual_start: date | None = None
    actual_end: date | None = None


@dataclass(slots=True, frozen=True)
class ScheduleEntry:
    id: int
    label: str
    state: str | None
    day: date
    is_start: bool
    is_end: bool
    start_date: date
    end_date: date
    actual_start_date: date | None
    actual_end_date: date | None
    is_actual_start: bool
    is_actual_end: bool
    before_actual_start: bool
    after_actual_end: bool

    def to_dict(self) -> dict:
        """Flat, JSON-friendly view with calendar days rendered as day keys."""

        def _key(value: date | None) -> str | None:
            return value.isoformat() if value is not None else None

        return {
            "day": _key(self.day),
            "id": self.id,
            "label": self.label,
            "state": self.state,
            "start_date": _key(self.start_date),
            "end_date": _key(self.end_date),
            "is_start": self.is_start,
            "is_end": self.is_end,
            "actual_start_date": _key(self.actual_start_date),
            "actual_end_date": _key(self.actual_end_date),
            "is_actual_start": self.is_actual_start,
            "is_actual_end": self.is_actual_end,
            "before_actual_start": self.before_actual_start,
            "after_actual_end": self.after_actual_end,
        }


Schedule = dict[str, list[ScheduleEntry]]
