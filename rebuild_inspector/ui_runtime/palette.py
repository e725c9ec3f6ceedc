"""Tier colors shared by inspector overlays."""

from __future__ import annotations

from rebuild_inspector.telemetry.records import Severity, Thresholds
from rebuild_inspector.telemetry.thresholds import DEFAULT_VISUAL_THRESHOLDS, classify_severity

TIER_COLORS: dict[Severity, str] = {
    Severity.STABLE: "#22c55e",
    Severity.MEDIUM: "#f97316",
    Severity.HIGH: "#ef4444",
}

PANEL_BG = "#111827"
PANEL_BORDER = "#374151"
TEXT_PRIMARY = "#f9fafb"
TEXT_MUTED = "#9ca3af"


def color_for_count(count: int, thresholds: Thresholds = DEFAULT_VISUAL_THRESHOLDS) -> str:
    return TIER_COLORS[classify_severity(count, thresholds)]


def with_alpha(color: str, alpha: float) -> str:
    """Return `#rrggbb` color with an `aa` alpha suffix."""
    clamped = min(1.0, max(0.0, float(alpha)))
    base = color[:7] if color.startswith("#") and len(color) >= 7 else color
    return f"{base}{round(clamped * 255):02x}"
