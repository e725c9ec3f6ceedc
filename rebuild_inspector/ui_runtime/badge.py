"""Per-component rebuild count badge."""

from __future__ import annotations

from dataclasses import dataclass

from rebuild_inspector.api.inspector import RebuildQueryAPI
from rebuild_inspector.api.render import OverlayRenderer
from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.telemetry.records import Severity, Thresholds
from rebuild_inspector.telemetry.thresholds import DEFAULT_VISUAL_THRESHOLDS, classify_severity
from rebuild_inspector.ui_runtime.palette import TIER_COLORS, TEXT_PRIMARY, with_alpha


@dataclass(frozen=True, slots=True)
class BadgeView:
    name: str
    count: int
    severity: Severity
    color: str

    @property
    def label(self) -> str:
        return f"×{self.count}"


def build_badge_view(
    query: RebuildQueryAPI,
    name: str,
    thresholds: Thresholds = DEFAULT_VISUAL_THRESHOLDS,
) -> BadgeView | None:
    """Return badge state for `name`, or None when instrumentation is off."""
    if not query.instrumentation_enabled:
        return None
    stats = query.get_stats(name)
    count = stats.count if stats is not None else 0
    severity = classify_severity(count, thresholds)
    return BadgeView(name=name, count=count, severity=severity, color=TIER_COLORS[severity])


@dataclass(frozen=True, slots=True)
class RebuildBadge:
    """Draw a small count pill pinned to a component's top-right corner."""

    key_prefix: str = "rebuild:badge"
    offset: float = -4.0
    font_size: float = 10.0
    char_width: float = 6.5
    height: float = 16.0
    padding_x: float = 6.0
    opacity: float = 0.9
    z: float = 6000.0

    def draw(self, renderer: OverlayRenderer, view: BadgeView, anchor: Rect) -> Rect:
        label = view.label
        width = 2.0 * self.padding_x + len(label) * self.char_width
        x = anchor.x + anchor.w - width - self.offset
        y = anchor.y + self.offset
        key = f"{self.key_prefix}:{view.name}"
        renderer.add_rect(
            f"{key}:bg",
            x,
            y,
            width,
            self.height,
            with_alpha(view.color, self.opacity),
            z=self.z,
        )
        renderer.add_outline(f"{key}:border", x, y, width, self.height, TEXT_PRIMARY, width=1.0, z=self.z)
        renderer.add_text(
            f"{key}:label",
            label,
            x + width / 2.0,
            y + self.height / 2.0,
            font_size=self.font_size,
            color=TEXT_PRIMARY,
            anchor="center",
            z=self.z + 1.0,
        )
        return Rect(x, y, width, self.height)
