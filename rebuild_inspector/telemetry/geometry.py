"""Geometry primitives shared by the heatmap aggregator and overlays."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle in host coordinate space."""

    x: float
    y: float
    w: float
    h: float

    @property
    def has_area(self) -> bool:
        return self.w > 0.0 and self.h > 0.0

    def inflate(self, delta: float) -> Rect:
        """Return a rectangle grown by `delta` on every side."""
        return Rect(
            x=self.x - delta,
            y=self.y - delta,
            w=self.w + 2.0 * delta,
            h=self.h + 2.0 * delta,
        )
