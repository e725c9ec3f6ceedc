"""Public rebuild inspector API contracts."""

from rebuild_inspector.api.inspector import (
    RebuildInspectorAPI,
    RebuildQueryAPI,
    create_rebuild_inspector,
)
from rebuild_inspector.api.render import OverlayRenderer
from rebuild_inspector.api.scheduling import FrameScheduler, create_frame_scheduler

__all__ = [
    "FrameScheduler",
    "OverlayRenderer",
    "RebuildInspectorAPI",
    "RebuildQueryAPI",
    "create_frame_scheduler",
    "create_rebuild_inspector",
]
