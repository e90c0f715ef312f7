"""Duration shorthand parsing ("14d", "2w", "3 weeks") for sprint plan lengths."""

from __future__ import annotations

import re

from sprint_app.core.config import DURATION_UNIT_DAYS

_DURATION_RE = re.compile(r"^([0-9]+)\s*([a-z]+)$", re.IGNORECASE | re.ASCII)


def parse_duration_days(text: str | None) -> int | None:
    """Convert a duration expression into a whole number of days.

    Parameters
    ----------
    text : str or None
        An unsigned integer followed by a unit (``d``/``day``/``days`` or
        ``w``/``week``/``weeks``), optionally separated by whitespace.

    Returns
    -------
    int or None
        Number of days, or None when the text does not match the grammar or
        describes a zero-length duration.

    Examples
    --------
    >>> parse_duration_days("2w")
    14
    >>> parse_duration_days("3 weeks")
    21
    >>> parse_duration_days("  0d  ") is None
    True
    """
    if not text:
        return None
    match = _DURATION_RE.match(str(text).strip())
    if not match:
        return None
    multiplier = DURATION_UNIT_DAYS.get(match.group(2).lower())
    if multiplier is None:
        return None
    days = int(match.group(1)) * multiplier
    return days if days > 0 else None
