"""Rebuild telemetry and classification core."""

from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.telemetry.heatmap import CountLookup, GeometryResolver, HeatmapAggregator
from rebuild_inspector.telemetry.inspector import RebuildInspector
from rebuild_inspector.telemetry.notifier import ChangeListener, ChangeNotifier, Subscription
from rebuild_inspector.telemetry.reasons import (
    ReasonClassifier,
    capture_call_context,
    classify_reason,
)
from rebuild_inspector.telemetry.records import (
    DEFAULT_THRESHOLDS,
    ComponentStats,
    HeatmapEntry,
    RebuildReason,
    Severity,
    Suggestion,
    Thresholds,
)
from rebuild_inspector.telemetry.stats_store import LOG_CROSSING_THRESHOLDS, RebuildStatsStore
from rebuild_inspector.telemetry.suggestions import (
    DEFAULT_HIGH_CUTOFF,
    DEFAULT_MEDIUM_CUTOFF,
    build_suggestions,
)
from rebuild_inspector.telemetry.thresholds import DEFAULT_VISUAL_THRESHOLDS, classify_severity

__all__ = [
    "ChangeListener",
    "ChangeNotifier",
    "ComponentStats",
    "CountLookup",
    "DEFAULT_HIGH_CUTOFF",
    "DEFAULT_MEDIUM_CUTOFF",
    "DEFAULT_THRESHOLDS",
    "DEFAULT_VISUAL_THRESHOLDS",
    "GeometryResolver",
    "HeatmapAggregator",
    "HeatmapEntry",
    "LOG_CROSSING_THRESHOLDS",
    "ReasonClassifier",
    "RebuildInspector",
    "RebuildReason",
    "RebuildStatsStore",
    "Rect",
    "Severity",
    "Subscription",
    "Suggestion",
    "Thresholds",
    "build_suggestions",
    "capture_call_context",
    "classify_reason",
    "classify_severity",
]
