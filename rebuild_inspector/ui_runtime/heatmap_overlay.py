"""Heatmap overlay outlining tracked components by rebuild tier."""

from __future__ import annotations

from dataclasses import dataclass

from rebuild_inspector.api.inspector import RebuildQueryAPI
from rebuild_inspector.api.render import OverlayRenderer
from rebuild_inspector.ui_runtime.palette import color_for_count, with_alpha


@dataclass(frozen=True, slots=True)
class HeatmapOverlay:
    border_width: float = 2.0
    opacity: float = 0.6
    key_prefix: str = "rebuild:heatmap"
    z: float = 5000.0

    def draw(self, renderer: OverlayRenderer, query: RebuildQueryAPI) -> int:
        """Outline every on-screen tracked component and return how many were drawn."""
        if not query.instrumentation_enabled:
            return 0
        drawn = 0
        for entry in query.snapshot_heatmap():
            rect = entry.rect.inflate(self.border_width / 2.0)
            renderer.add_outline(
                f"{self.key_prefix}:{entry.name}",
                rect.x,
                rect.y,
                rect.w,
                rect.h,
                with_alpha(color_for_count(entry.count), self.opacity),
                width=self.border_width,
                z=self.z,
            )
            drawn += 1
        return drawn
