from __future__ import annotations

from collections.abc import Callable

import pytest

from rebuild_inspector.runtime.scheduler import PostFrameScheduler
from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.telemetry.inspector import RebuildInspector


class FakeRenderer:
    def __init__(self) -> None:
        self.rects: dict[str, tuple[float, float, float, float, str]] = {}
        self.outlines: dict[str, tuple[float, float, float, float, str, float]] = {}
        self.texts: dict[str, tuple[str, float, float, str, str]] = {}

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
        self.rects[key] = (x, y, w, h, color)

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
        self.outlines[key] = (x, y, w, h, color, width)

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
        self.texts[key] = (text, x, y, color, anchor)

    def text_values(self) -> list[str]:
        return [entry[0] for entry in self.texts.values()]


class FakeLayoutHandle:
    """Stand-in for a host layout reference that can go stale."""

    def __init__(self, rect: Rect | None) -> None:
        self.rect = rect
        self.attached = True


def resolve_fake_handle(handle: object) -> Rect | None:
    if not getattr(handle, "attached", False):
        return None
    return getattr(handle, "rect", None)


class StepClock:
    def __init__(self, start_ms: int = 1_000, step_ms: int = 16) -> None:
        self.now_ms = start_ms
        self.step_ms = step_ms

    def __call__(self) -> int:
        self.now_ms += self.step_ms
        return self.now_ms


@pytest.fixture
def scheduler() -> PostFrameScheduler:
    return PostFrameScheduler()


@pytest.fixture
def inspector_factory(scheduler: PostFrameScheduler) -> Callable[..., RebuildInspector]:
    def _make(**kwargs: object) -> RebuildInspector:
        kwargs.setdefault("scheduler", scheduler)
        kwargs.setdefault("geometry_resolver", resolve_fake_handle)
        kwargs.setdefault("clock", StepClock())
        return RebuildInspector(**kwargs)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def inspector(inspector_factory: Callable[..., RebuildInspector]) -> RebuildInspector:
    return inspector_factory()
