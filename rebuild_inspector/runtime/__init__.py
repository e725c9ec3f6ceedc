"""Host integration: configuration, logging, frame scheduling and trackers."""

from rebuild_inspector.runtime.config import (
    BUILD_INSTRUMENTED,
    InspectorConfig,
    load_inspector_config,
    resolve_log_level_name,
)
from rebuild_inspector.runtime.logging import (
    InspectorLoggingConfig,
    JsonFormatter,
    configure_inspector_logging,
    get_inspector_logger,
    setup_inspector_logging,
    shutdown_inspector_logging,
)
from rebuild_inspector.runtime.scheduler import PostFrameScheduler
from rebuild_inspector.runtime.tracker import RebuildTracker

__all__ = [
    "BUILD_INSTRUMENTED",
    "InspectorConfig",
    "InspectorLoggingConfig",
    "JsonFormatter",
    "PostFrameScheduler",
    "RebuildTracker",
    "configure_inspector_logging",
    "get_inspector_logger",
    "load_inspector_config",
    "resolve_log_level_name",
    "setup_inspector_logging",
    "shutdown_inspector_logging",
]
