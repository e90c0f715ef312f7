"""Calendar-day helpers shared by the schedule engine and the calendar pages.

Every value that reaches the schedule is reduced to a calendar day in the
display timezone. Bare ``date`` values are calendar days already and pass
through untouched; naive datetimes are read as wall-clock times in the
display zone; aware datetimes are converted into it first.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, tzinfo
from typing import Any

import pandas as pd
import pytz

from .config import TIMEZONE

DATE_ONLY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def display_timezone(name: str | None = None) -> tzinfo:
    return pytz.timezone(name or TIMEZONE)


def to_day(value: Any, tz: tzinfo | None = None) -> date | None:
    """Reduce a point in time to its calendar day in ``tz``.

    Returns None for missing or unparseable input.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz or display_timezone())
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return to_day(parse_point(value), tz)
    return None


def to_day_key(value: Any, tz: tzinfo | None = None) -> str | None:
    """Canonical ``YYYY-MM-DD`` key for a point in time (None when unresolvable)."""
    day = to_day(value, tz)
    return day.isoformat() if day is not None else None


def parse_day_key(key: str) -> date:
    """Inverse of :func:`to_day_key`; raises ValueError for malformed keys."""
    match = DATE_ONLY_RE.match(key.strip())
    if not match:
        raise ValueError(f"Invalid day key: {key!r}")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


def parse_point(value: Any) -> datetime | date | None:
    """Parse a raw API timestamp.

    ``YYYY-MM-DD`` strings stay calendar days. Anything else goes through
    pandas; naive timestamps are assumed UTC. Unparseable input yields None.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, (datetime, date)):
        return value
    text = str(value).strip()
    if not text:
        return None
    match = DATE_ONLY_RE.match(text)
    if match:
        try:
            return parse_day_key(text)
        except ValueError:
            return None
    try:
        ts = pd.to_datetime(text, utc=True, errors="coerce")
    except (TypeError, ValueError):
        return None
    if ts is None or pd.isna(ts):
        return None
    return ts.to_pydatetime()


def iter_days(start: date, end: date):
    """Yield every calendar day from ``start`` to ``end`` inclusive."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)
