"""Rebuild inspector facade composing stats, heatmap and suggestions."""

from __future__ import annotations

from collections.abc import Callable

from rebuild_inspector.api.scheduling import FrameScheduler, create_frame_scheduler
from rebuild_inspector.telemetry.heatmap import GeometryResolver, HeatmapAggregator
from rebuild_inspector.telemetry.notifier import ChangeNotifier
from rebuild_inspector.telemetry.reasons import ReasonClassifier, classify_reason
from rebuild_inspector.telemetry.records import ComponentStats, HeatmapEntry, Suggestion
from rebuild_inspector.telemetry.stats_store import RebuildStatsStore
from rebuild_inspector.telemetry.suggestions import (
    DEFAULT_HIGH_CUTOFF,
    DEFAULT_MEDIUM_CUTOFF,
    build_suggestions,
)


class RebuildInspector:
    """Explicitly owned rebuild telemetry instance.

    Hosts create one per application (or per test) and hand it to trackers
    and overlays; nothing here is process-global.
    """

    def __init__(
        self,
        *,
        instrumentation_enabled: bool = True,
        debug_logs_enabled: bool = False,
        geometry_resolver: GeometryResolver | None = None,
        scheduler: FrameScheduler | None = None,
        classifier: ReasonClassifier = classify_reason,
        clock: Callable[[], int] | None = None,
        suggestion_medium_cutoff: int = DEFAULT_MEDIUM_CUTOFF,
        suggestion_high_cutoff: int = DEFAULT_HIGH_CUTOFF,
        capture_reasons: bool = False,
        dashboard_top_n: int = 10,
    ) -> None:
        self._enabled = bool(instrumentation_enabled)
        self._scheduler = scheduler if scheduler is not None else create_frame_scheduler()
        self._notifier = ChangeNotifier(self._scheduler)
        self._stats = RebuildStatsStore(
            self._notifier,
            enabled=self._enabled,
            debug_logs_enabled=debug_logs_enabled,
            classifier=classifier,
            clock=clock,
        )
        self._heatmap = HeatmapAggregator(geometry_resolver, enabled=self._enabled)
        self._medium_cutoff = int(suggestion_medium_cutoff)
        self._high_cutoff = int(suggestion_high_cutoff)
        self._capture_reasons = bool(capture_reasons)
        self._dashboard_top_n = max(1, int(dashboard_top_n))

    @property
    def instrumentation_enabled(self) -> bool:
        return self._enabled

    @property
    def capture_reasons(self) -> bool:
        """Default for trackers that do not choose whether to capture call context."""
        return self._capture_reasons

    @property
    def dashboard_top_n(self) -> int:
        return self._dashboard_top_n

    @property
    def scheduler(self) -> FrameScheduler:
        return self._scheduler

    @property
    def stats(self) -> RebuildStatsStore:
        return self._stats

    @property
    def heatmap(self) -> HeatmapAggregator:
        return self._heatmap

    @property
    def version(self) -> int:
        return self._notifier.version

    def record_event(self, name: str, capture: str | None = None) -> None:
        self._stats.record_event(name, capture)

    def get_stats(self, name: str) -> ComponentStats | None:
        return self._stats.get_stats(name)

    def get_all_stats(self) -> list[ComponentStats]:
        return self._stats.get_all_stats()

    def get_top(self, n: int) -> list[ComponentStats]:
        return self._stats.get_top(n)

    def reset(self, name: str) -> None:
        self._stats.reset(name)

    def reset_all(self) -> None:
        self._stats.reset_all()

    def clear(self) -> None:
        """Drop all records and geometry registrations with one notification."""
        if not self._enabled:
            return
        self._heatmap.clear()
        self._stats.clear()

    def subscribe_to_changes(self) -> ChangeNotifier:
        return self._notifier

    def register_geometry(self, name: str, handle: object) -> None:
        self._heatmap.register(name, handle)

    def unregister_geometry(self, name: str) -> None:
        self._heatmap.unregister(name)

    def snapshot_heatmap(self) -> list[HeatmapEntry]:
        return self._heatmap.snapshot(self._stats.count_for)

    def build_suggestions(self) -> list[Suggestion]:
        return build_suggestions(
            self._stats.get_all_stats(),
            medium_cutoff=self._medium_cutoff,
            high_cutoff=self._high_cutoff,
        )


__all__ = ["RebuildInspector"]
