"""Runtime rebuild telemetry for UI component trees.

Wrap components with `RebuildTracker`, call `on_build()` from their build
path and read counts, heatmap geometry and suggestions back through the
`RebuildInspector` created by `create_rebuild_inspector()`.
"""

from rebuild_inspector.api import (
    FrameScheduler,
    OverlayRenderer,
    RebuildInspectorAPI,
    RebuildQueryAPI,
    create_frame_scheduler,
    create_rebuild_inspector,
)
from rebuild_inspector.runtime import (
    InspectorConfig,
    PostFrameScheduler,
    RebuildTracker,
    load_inspector_config,
    setup_inspector_logging,
)
from rebuild_inspector.telemetry import (
    ComponentStats,
    HeatmapEntry,
    RebuildInspector,
    RebuildReason,
    Rect,
    Severity,
    Suggestion,
    Thresholds,
    build_suggestions,
    capture_call_context,
    classify_reason,
    classify_severity,
)

__all__ = [
    "ComponentStats",
    "FrameScheduler",
    "HeatmapEntry",
    "InspectorConfig",
    "OverlayRenderer",
    "PostFrameScheduler",
    "RebuildInspector",
    "RebuildInspectorAPI",
    "RebuildQueryAPI",
    "RebuildReason",
    "RebuildTracker",
    "Rect",
    "Severity",
    "Suggestion",
    "Thresholds",
    "build_suggestions",
    "capture_call_context",
    "classify_reason",
    "classify_severity",
    "create_frame_scheduler",
    "create_rebuild_inspector",
    "load_inspector_config",
    "setup_inspector_logging",
]
