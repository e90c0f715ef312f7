"""Load and expose schedule column configuration from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import DAY_DETAIL_COLUMNS, SCHEDULE_COLUMNS

logger = logging.getLogger(__name__)

_CACHE: dict[str, list[str]] | None = None


def _defaults() -> dict[str, list[str]]:
    return {
        "schedule": list(SCHEDULE_COLUMNS),
        "day_detail": list(DAY_DETAIL_COLUMNS),
    }


def load_column_sets(base_path: str | Path | None = None, *, reload: bool = False):
    global _CACHE
    if _CACHE is not None and not reload:
        return _CACHE
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / "columns.yaml"
    if not yaml_path.exists():
        _CACHE = _defaults()
        return _CACHE
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Could not read %s, using default columns: %s", yaml_path, exc)
        _CACHE = _defaults()
        return _CACHE
    sets = data.get("sets", {}) if isinstance(data, dict) else {}
    defaults = _defaults()
    _CACHE = {name: list(sets.get(name) or cols) for name, cols in defaults.items()}
    return _CACHE


def get_columns(set_name: str) -> list[str]:
    sets = load_column_sets()
    return list(sets.get(set_name, []))
