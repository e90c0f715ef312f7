"""Tracker REST client wrapper (sprint listing with an in-memory TTL cache)."""

from __future__ import annotations

import hashlib
import json
import time
from typing import Any

import requests

from .config import API_CACHE_TTL_SECONDS, API_TIMEOUT_SECONDS, SPRINT_LIST_PATH


class SprintAPI:
    def __init__(
        self,
        server: str,
        token: str | None = None,
        *,
        session: requests.Session | None = None,
        cache_ttl: float = API_CACHE_TTL_SECONDS,
    ):
        self.server = server.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})
        # Simple in-memory cache: {(hash): (timestamp, data)}
        self._cache: dict[str, tuple[float, Any]] = {}
        self._cache_ttl = float(cache_ttl)

    def clear_cache(self) -> None:
        """Reset the in-memory response cache."""
        self._cache.clear()

    def _cache_key(self, path: str, params: dict[str, Any] | None) -> str:
        payload = {"path": path, "params": params or {}}
        return hashlib.sha256(json.dumps(payload, sort_keys=True, default=str).encode()).hexdigest()

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``path`` and unwrap the ``{"data": ...}`` envelope.

        Raises RuntimeError on transport failures, HTTP errors, empty bodies,
        and envelopes carrying an ``error`` object.
        """
        key = self._cache_key(path, params)
        now = time.time()
        cached = self._cache.get(key)
        if cached and (now - cached[0]) < self._cache_ttl:
            return cached[1]

        url = f"{self.server}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            resp = self.session.get(url, params=query, timeout=API_TIMEOUT_SECONDS)
        except requests.RequestException as exc:
            raise RuntimeError(f"GET {path} failed: {exc}") from exc

        raw = resp.text or ""
        payload: Any = None
        if raw:
            try:
                payload = json.loads(raw)
            except ValueError:
                payload = None

        if resp.status_code >= 400:
            message = _error_message(payload) or raw.strip()[:200] or str(resp.status_code)
            raise RuntimeError(f"GET {path} failed: {message}")
        if payload is None:
            raise RuntimeError(f"GET {path} failed: Empty response")
        if isinstance(payload, dict) and payload.get("error"):
            raise RuntimeError(_error_message(payload) or f"GET {path} failed")

        data = payload["data"] if isinstance(payload, dict) and "data" in payload else payload
        self._cache[key] = (now, data)
        return data

    def list_sprints(self) -> list[dict[str, Any]]:
        data = self.get(SPRINT_LIST_PATH)
        if isinstance(data, dict):
            data = data.get("sprints") or []
        if not isinstance(data, list):
            raise RuntimeError(f"Unexpected sprint list payload type: {type(data)!r}")
        return data


def _error_message(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    message = payload.get("message")
    return str(message) if message else None
