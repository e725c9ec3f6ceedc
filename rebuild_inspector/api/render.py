"""Drawing contract the host renderer provides to inspector overlays."""

from __future__ import annotations

from typing import Protocol


class OverlayRenderer(Protocol):
    """Minimal immediate-mode primitives used by badges, dashboard and heatmap."""

    def add_rect(
        self,
        key: str,
        x: float,
        y: float,
        w: float,
        h: float,
        color: str,
        z: float = 0.0,
    ) -> None:
        """Draw or update a filled rectangle."""

    def add_outline(
        self,
        key: str,
        x: float,
        y: float,
        w: float,
        h: float,
        color: str,
        width: float = 1.0,
        z: float = 0.0,
    ) -> None:
        """Draw or update a stroked rectangle."""

    def add_text(
        self,
        key: str,
        text: str,
        x: float,
        y: float,
        font_size: float = 12.0,
        color: str = "#ffffff",
        anchor: str = "top-left",
        z: float = 0.0,
    ) -> None:
        """Draw or update a text label."""
