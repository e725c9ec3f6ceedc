"""Read-only presentation adapters over the rebuild inspector."""

from rebuild_inspector.ui_runtime.badge import BadgeView, RebuildBadge, build_badge_view
from rebuild_inspector.ui_runtime.dashboard import (
    DashboardOverlay,
    DashboardRow,
    DashboardViewModel,
    build_dashboard_view_model,
)
from rebuild_inspector.ui_runtime.heatmap_overlay import HeatmapOverlay
from rebuild_inspector.ui_runtime.inspector_overlay import InspectorOverlay
from rebuild_inspector.ui_runtime.palette import TIER_COLORS, color_for_count, with_alpha

__all__ = [
    "BadgeView",
    "DashboardOverlay",
    "DashboardRow",
    "DashboardViewModel",
    "HeatmapOverlay",
    "InspectorOverlay",
    "RebuildBadge",
    "TIER_COLORS",
    "build_badge_view",
    "build_dashboard_view_model",
    "color_for_count",
    "with_alpha",
]
