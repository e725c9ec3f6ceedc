"""In-app dashboard listing the most rebuilt components."""

from __future__ import annotations

from dataclasses import dataclass, field

from rebuild_inspector.api.inspector import RebuildQueryAPI
from rebuild_inspector.api.render import OverlayRenderer
from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.ui_runtime.palette import (
    PANEL_BG,
    PANEL_BORDER,
    TEXT_MUTED,
    TEXT_PRIMARY,
    color_for_count,
)

DASHBOARD_TITLE = "Rebuild Inspector"
EMPTY_MESSAGE = ("No tracked components yet.", "Wrap components with RebuildTracker.")


@dataclass(frozen=True)
class DashboardRow:
    name: str
    count: int
    color: str
    reason: str | None = None

    @property
    def count_label(self) -> str:
        return f"×{self.count}"


@dataclass(frozen=True)
class DashboardViewModel:
    title: str
    rows: list[DashboardRow]
    suggestions: list[str] = field(default_factory=list)
    version: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.rows


def build_dashboard_view_model(
    query: RebuildQueryAPI,
    *,
    top_n: int = 10,
    include_suggestions: bool = True,
) -> DashboardViewModel | None:
    if not query.instrumentation_enabled:
        return None
    rows = [
        DashboardRow(
            name=stats.name,
            count=stats.count,
            color=color_for_count(stats.count),
            reason=str(stats.inferred_reason) if stats.inferred_reason is not None else None,
        )
        for stats in query.get_top(max(0, int(top_n)))
    ]
    suggestions: list[str] = []
    if include_suggestions:
        suggestions = [suggestion.message for suggestion in query.build_suggestions()]
    return DashboardViewModel(
        title=DASHBOARD_TITLE,
        rows=rows,
        suggestions=suggestions,
        version=query.subscribe_to_changes().version,
    )


@dataclass(frozen=True, slots=True)
class DashboardOverlay:
    """Render the dashboard panel using OverlayRenderer primitives."""

    key_prefix: str = "rebuild:dashboard"
    x: float = 16.0
    y: float = 50.0
    width: float = 280.0
    max_height: float = 300.0
    line_height: float = 18.0
    font_size: float = 12.0
    title_font_size: float = 14.0
    max_suggestions: int = 3
    z_bg: float = 7000.0
    z_text: float = 7001.0

    def draw(self, renderer: OverlayRenderer, view: DashboardViewModel | None) -> Rect | None:
        if view is None:
            return None
        lines = self._format_lines(view)
        visible = max(1, int((self.max_height - 12.0) // self.line_height))
        lines = lines[:visible]
        height = 12.0 + len(lines) * self.line_height
        renderer.add_rect(
            f"{self.key_prefix}:bg", self.x, self.y, self.width, height, PANEL_BG, z=self.z_bg
        )
        renderer.add_outline(
            f"{self.key_prefix}:border",
            self.x,
            self.y,
            self.width,
            height,
            PANEL_BORDER,
            width=1.0,
            z=self.z_bg,
        )
        text_x = self.x + 10.0
        text_y = self.y + 6.0
        for idx, (text, color, trailing, font_size) in enumerate(lines):
            line_y = text_y + idx * self.line_height
            renderer.add_text(
                f"{self.key_prefix}:line:{idx}",
                text,
                text_x,
                line_y,
                font_size=font_size,
                color=color,
                anchor="top-left",
                z=self.z_text,
            )
            if trailing:
                renderer.add_text(
                    f"{self.key_prefix}:count:{idx}",
                    trailing,
                    self.x + self.width - 10.0,
                    line_y,
                    font_size=font_size,
                    color=color,
                    anchor="top-right",
                    z=self.z_text,
                )
        return Rect(self.x, self.y, self.width, height)

    def _format_lines(self, view: DashboardViewModel) -> list[tuple[str, str, str, float]]:
        lines: list[tuple[str, str, str, float]] = [
            (view.title, TEXT_PRIMARY, "", self.title_font_size)
        ]
        if view.is_empty:
            lines.extend((text, TEXT_MUTED, "", self.font_size) for text in EMPTY_MESSAGE)
            return lines
        for row in view.rows:
            name = row.name if row.reason is None else f"{row.name} ({row.reason})"
            lines.append((name, row.color, row.count_label, self.font_size))
        for message in view.suggestions[: max(0, self.max_suggestions)]:
            lines.append((message, TEXT_MUTED, "", self.font_size))
        return lines
