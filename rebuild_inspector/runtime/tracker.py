"""Per-component render hook the host calls once per completed build."""

from __future__ import annotations

import logging

from rebuild_inspector.api.inspector import RebuildInspectorAPI
from rebuild_inspector.telemetry.reasons import capture_call_context
from rebuild_inspector.telemetry.records import DEFAULT_THRESHOLDS, Severity, Thresholds
from rebuild_inspector.telemetry.thresholds import classify_severity
from rebuild_inspector.ui_runtime.badge import BadgeView, build_badge_view

_LOG = logging.getLogger("rebuild_inspector.tracker")


class RebuildTracker:
    """Report builds of one named component to the inspector.

    The host framework wires `on_build()` into the component's build path
    and `attach()`/`detach()` into its mount lifecycle. With instrumentation
    disabled every method is a cheap no-op.
    """

    def __init__(
        self,
        inspector: RebuildInspectorAPI,
        name: str,
        *,
        thresholds: Thresholds = DEFAULT_THRESHOLDS,
        show_overlay: bool = True,
        log_to_console: bool = False,
        max_rebuilds_to_warn: int | None = None,
        capture_reason: bool | None = None,
        heatmap: bool = False,
    ) -> None:
        self._inspector = inspector
        self._name = name
        self._thresholds = thresholds
        self._show_overlay = bool(show_overlay)
        self._log_to_console = bool(log_to_console)
        self._max_rebuilds_to_warn = max_rebuilds_to_warn
        # None defers to the inspector-wide capture setting.
        self._capture_reason = capture_reason
        self._heatmap = bool(heatmap)
        self._attached = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def thresholds(self) -> Thresholds:
        return self._thresholds

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def count(self) -> int:
        stats = self._inspector.get_stats(self._name)
        return stats.count if stats is not None else 0

    def on_build(self) -> int:
        """Record one build and return the updated count."""
        if not self._inspector.instrumentation_enabled:
            return 0
        capture_reason = self._capture_reason
        if capture_reason is None:
            capture_reason = self._inspector.capture_reasons
        capture = capture_call_context(skip=1) if capture_reason else None
        self._inspector.record_event(self._name, capture)
        count = self.count
        if self._log_to_console:
            _LOG.info("rebuild name=%s count=%d", self._name, count)
        limit = self._max_rebuilds_to_warn
        if limit is not None and count >= limit:
            _LOG.warning("rebuild_limit_exceeded name=%s limit=%d count=%d", self._name, limit, count)
        return count

    def attach(self, handle: object) -> None:
        """Register the component's geometry handle once it is on screen."""
        if not self._heatmap or not self._inspector.instrumentation_enabled:
            return
        self._inspector.register_geometry(self._name, handle)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        self._inspector.unregister_geometry(self._name)
        self._attached = False

    def severity(self) -> Severity:
        return classify_severity(self.count, self._thresholds)

    def badge(self) -> BadgeView | None:
        if not self._show_overlay:
            return None
        return build_badge_view(self._inspector, self._name, self._thresholds)
