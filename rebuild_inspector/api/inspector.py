"""Public rebuild inspector API contracts."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from rebuild_inspector.api.scheduling import FrameScheduler
from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.telemetry.records import ComponentStats, HeatmapEntry, RebuildReason, Suggestion

if TYPE_CHECKING:
    from rebuild_inspector.runtime.config import InspectorConfig
    from rebuild_inspector.telemetry.notifier import ChangeNotifier


class RebuildQueryAPI(Protocol):
    """Read-only query surface consumed by presentation adapters."""

    @property
    def instrumentation_enabled(self) -> bool:
        """Return whether telemetry is active."""

    @property
    def dashboard_top_n(self) -> int:
        """Return how many rows dashboards show by default."""

    def get_stats(self, name: str) -> ComponentStats | None:
        """Return a copy of one component's stats, or None if untracked."""

    def get_all_stats(self) -> list[ComponentStats]:
        """Return all stats sorted by count, highest first."""

    def get_top(self, n: int) -> list[ComponentStats]:
        """Return the `n` most rebuilt components."""

    def subscribe_to_changes(self) -> ChangeNotifier:
        """Return the versioned change signal."""

    def snapshot_heatmap(self) -> list[HeatmapEntry]:
        """Return on-screen rectangles joined with rebuild counts."""

    def build_suggestions(self) -> list[Suggestion]:
        """Return optimization hints for noisy components."""


class RebuildInspectorAPI(RebuildQueryAPI, Protocol):
    """Full inspector surface used by the host integration."""

    @property
    def capture_reasons(self) -> bool:
        """Return whether trackers capture call context unless told otherwise."""

    def record_event(self, name: str, capture: str | None = None) -> None:
        """Count one completed render of `name`."""

    def reset(self, name: str) -> None:
        """Zero one component's count."""

    def reset_all(self) -> None:
        """Zero every component's count."""

    def clear(self) -> None:
        """Forget all components and geometry registrations."""

    def register_geometry(self, name: str, handle: object) -> None:
        """Attach an opaque host geometry handle to `name`."""

    def unregister_geometry(self, name: str) -> None:
        """Detach the geometry handle for `name`."""


def create_rebuild_inspector(
    config: InspectorConfig | None = None,
    *,
    geometry_resolver: Callable[[object], Rect | None] | None = None,
    scheduler: FrameScheduler | None = None,
    classifier: Callable[[str], RebuildReason] | None = None,
    clock: Callable[[], int] | None = None,
) -> RebuildInspectorAPI:
    """Create default inspector implementation from config (env when omitted)."""
    from rebuild_inspector.runtime.config import load_inspector_config
    from rebuild_inspector.telemetry.inspector import RebuildInspector
    from rebuild_inspector.telemetry.reasons import classify_reason

    resolved = config if config is not None else load_inspector_config()
    return RebuildInspector(
        instrumentation_enabled=resolved.instrumentation_enabled,
        debug_logs_enabled=resolved.debug_logs_enabled,
        geometry_resolver=geometry_resolver,
        scheduler=scheduler,
        classifier=classifier or classify_reason,
        clock=clock,
        suggestion_medium_cutoff=resolved.suggestion_medium_cutoff,
        suggestion_high_cutoff=resolved.suggestion_high_cutoff,
        capture_reasons=resolved.capture_reasons,
        dashboard_top_n=resolved.dashboard_top_n,
    )
