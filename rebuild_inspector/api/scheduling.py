"""Public frame scheduling contract consumed from the host."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class FrameScheduler(Protocol):
    """Host "schedule after current frame" primitive."""

    def post_frame_callback(self, callback: Callable[[], None]) -> object:
        """Run `callback` once the current frame has completed."""


def create_frame_scheduler() -> FrameScheduler:
    """Create default host-pumped post-frame scheduler."""
    from rebuild_inspector.runtime.scheduler import PostFrameScheduler

    return PostFrameScheduler()
