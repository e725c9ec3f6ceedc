"""Severity tier classification for rebuild counts."""

from __future__ import annotations

from rebuild_inspector.telemetry.records import DEFAULT_THRESHOLDS, Severity, Thresholds

# Cut points for visual consumers (badges, heatmap borders) that carry no
# per-component Thresholds of their own.
DEFAULT_VISUAL_THRESHOLDS = Thresholds(stable_threshold=5, warning_threshold=20)


def classify_severity(count: int, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> Severity:
    """Return the half-open tier `count` falls into."""
    if count < thresholds.stable_threshold:
        return Severity.STABLE
    if count < thresholds.warning_threshold:
        return Severity.MEDIUM
    return Severity.HIGH


__all__ = ["DEFAULT_VISUAL_THRESHOLDS", "classify_severity"]
