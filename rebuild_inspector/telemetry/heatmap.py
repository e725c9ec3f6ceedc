"""Heatmap geometry registrations resolved against host layout."""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock

from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.telemetry.records import HeatmapEntry

_LOG = logging.getLogger("rebuild_inspector.heatmap")

GeometryResolver = Callable[[object], Rect | None]
CountLookup = Callable[[str], int]


def _unresolved(handle: object) -> Rect | None:
    _ = handle
    return None


class HeatmapAggregator:
    """Map component names to opaque host geometry handles.

    Handles are never dereferenced here; the host-supplied resolver turns a
    handle into an on-screen rectangle or reports it unavailable.
    """

    def __init__(self, resolver: GeometryResolver | None = None, *, enabled: bool = True) -> None:
        self._resolver = resolver or _unresolved
        self._enabled = bool(enabled)
        self._handles: dict[str, object] = {}
        self._lock = Lock()

    @property
    def registered_count(self) -> int:
        return len(self._handles)

    def register(self, name: str, handle: object) -> None:
        if not self._enabled:
            return
        with self._lock:
            self._handles[name] = handle

    def unregister(self, name: str) -> None:
        if not self._enabled:
            return
        with self._lock:
            self._handles.pop(name, None)

    def clear(self) -> None:
        with self._lock:
            self._handles.clear()

    def snapshot(self, count_for: CountLookup) -> list[HeatmapEntry]:
        """Return entries for handles that still resolve to a visible rect."""
        if not self._enabled:
            return []
        with self._lock:
            registered = tuple(self._handles.items())
        entries: list[HeatmapEntry] = []
        for name, handle in registered:
            rect = self._resolve(name, handle)
            if rect is None:
                continue
            entries.append(HeatmapEntry(name=name, rect=rect, count=int(count_for(name))))
        return entries

    def _resolve(self, name: str, handle: object) -> Rect | None:
        try:
            rect = self._resolver(handle)
        except Exception:  # pylint: disable=broad-exception-caught
            _LOG.debug("heatmap_handle_resolve_failed name=%s", name, exc_info=True)
            return None
        if rect is None or not rect.has_area:
            _LOG.debug("heatmap_handle_stale name=%s", name)
            return None
        return rect


__all__ = ["CountLookup", "GeometryResolver", "HeatmapAggregator"]
