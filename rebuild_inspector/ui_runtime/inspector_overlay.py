"""Toggleable overlay combining the dashboard and heatmap."""

from __future__ import annotations

from collections.abc import Callable

from rebuild_inspector.api.inspector import RebuildInspectorAPI
from rebuild_inspector.api.render import OverlayRenderer
from rebuild_inspector.telemetry.notifier import Subscription
from rebuild_inspector.ui_runtime.dashboard import DashboardOverlay, build_dashboard_view_model
from rebuild_inspector.ui_runtime.heatmap_overlay import HeatmapOverlay


class InspectorOverlay:
    """Host-facing overlay state: visibility toggles, reset and redraw tracking."""

    def __init__(
        self,
        inspector: RebuildInspectorAPI,
        *,
        dashboard_top_n: int | None = None,
        dashboard: DashboardOverlay | None = None,
        heatmap: HeatmapOverlay | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._inspector = inspector
        top_n = inspector.dashboard_top_n if dashboard_top_n is None else dashboard_top_n
        self._dashboard_top_n = max(1, int(top_n))
        self._dashboard = dashboard or DashboardOverlay(max_height=250.0)
        self._heatmap = heatmap or HeatmapOverlay()
        self._on_change = on_change
        self._show_dashboard = False
        self._show_heatmap = False
        self._needs_redraw = True
        self._subscription: Subscription | None = None
        if inspector.instrumentation_enabled:
            self._subscription = inspector.subscribe_to_changes().subscribe(self._handle_change)

    @property
    def show_dashboard(self) -> bool:
        return self._show_dashboard

    @property
    def show_heatmap(self) -> bool:
        return self._show_heatmap

    @property
    def needs_redraw(self) -> bool:
        return self._needs_redraw

    def toggle_dashboard(self) -> bool:
        self._show_dashboard = not self._show_dashboard
        self._needs_redraw = True
        return self._show_dashboard

    def toggle_heatmap(self) -> bool:
        self._show_heatmap = not self._show_heatmap
        self._needs_redraw = True
        return self._show_heatmap

    def reset(self) -> None:
        self._inspector.reset_all()

    def draw(self, renderer: OverlayRenderer) -> None:
        self._needs_redraw = False
        if not self._inspector.instrumentation_enabled:
            return
        if self._show_heatmap:
            self._heatmap.draw(renderer, self._inspector)
        if self._show_dashboard:
            view = build_dashboard_view_model(self._inspector, top_n=self._dashboard_top_n)
            self._dashboard.draw(renderer, view)

    def close(self) -> None:
        if self._subscription is None:
            return
        self._inspector.subscribe_to_changes().unsubscribe(self._subscription)
        self._subscription = None

    def _handle_change(self) -> None:
        self._needs_redraw = True
        if self._on_change is not None:
            self._on_change()
