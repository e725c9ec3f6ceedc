from __future__ import annotations

import logging

from rebuild_inspector.runtime.tracker import RebuildTracker
from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.telemetry.inspector import RebuildInspector
from rebuild_inspector.telemetry.records import RebuildReason, Severity, Thresholds
from rebuild_inspector.ui_runtime.palette import TIER_COLORS
from tests.rebuild_inspector.conftest import FakeLayoutHandle


def test_on_build_records_and_returns_count(inspector: RebuildInspector) -> None:
    tracker = RebuildTracker(inspector, "Counter")
    assert tracker.on_build() == 1
    assert tracker.on_build() == 2
    assert tracker.count == 2
    assert inspector.get_stats("Counter").count == 2


def test_log_to_console_logs_each_rebuild(inspector: RebuildInspector, caplog) -> None:
    caplog.set_level(logging.INFO, logger="rebuild_inspector.tracker")
    tracker = RebuildTracker(inspector, "Tile", log_to_console=True)
    tracker.on_build()
    tracker.on_build()
    messages = [r.getMessage() for r in caplog.records if r.name == "rebuild_inspector.tracker"]
    assert messages == ["rebuild name=Tile count=1", "rebuild name=Tile count=2"]


def test_max_rebuilds_to_warn_warns_at_and_above_limit(inspector: RebuildInspector, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="rebuild_inspector.tracker")
    tracker = RebuildTracker(inspector, "Feed", max_rebuilds_to_warn=2)
    for _ in range(3):
        tracker.on_build()
    warnings = [r.getMessage() for r in caplog.records if "rebuild_limit_exceeded" in r.getMessage()]
    assert warnings == [
        "rebuild_limit_exceeded name=Feed limit=2 count=2",
        "rebuild_limit_exceeded name=Feed limit=2 count=3",
    ]


def test_capture_reason_classifies_calling_context(inspector: RebuildInspector) -> None:
    tracker = RebuildTracker(inspector, "Form", capture_reason=True)

    def set_state_handler() -> None:
        tracker.on_build()

    set_state_handler()

    assert inspector.get_stats("Form").inferred_reason is RebuildReason.SET_STATE


def test_attach_registers_geometry_only_with_heatmap(inspector: RebuildInspector) -> None:
    plain = RebuildTracker(inspector, "Plain")
    mapped = RebuildTracker(inspector, "Mapped", heatmap=True)
    plain.attach(FakeLayoutHandle(Rect(0, 0, 10, 10)))
    mapped.attach(FakeLayoutHandle(Rect(20, 0, 10, 10)))
    mapped.on_build()

    assert plain.attached is False
    assert [(e.name, e.count) for e in inspector.snapshot_heatmap()] == [("Mapped", 1)]

    mapped.detach()
    assert mapped.attached is False
    assert inspector.snapshot_heatmap() == []


def test_severity_and_badge_use_tracker_thresholds(inspector: RebuildInspector) -> None:
    tracker = RebuildTracker(inspector, "Chip", thresholds=Thresholds(stable_threshold=2, warning_threshold=3))
    tracker.on_build()
    assert tracker.severity() is Severity.STABLE
    tracker.on_build()
    assert tracker.severity() is Severity.MEDIUM
    tracker.on_build()

    badge = tracker.badge()
    assert badge is not None
    assert badge.severity is Severity.HIGH
    assert badge.color == TIER_COLORS[Severity.HIGH]
    assert badge.label == "×3"


def test_badge_hidden_when_overlay_disabled(inspector: RebuildInspector) -> None:
    tracker = RebuildTracker(inspector, "Hidden", show_overlay=False)
    tracker.on_build()
    assert tracker.badge() is None


def test_tracker_is_noop_when_instrumentation_disabled(inspector_factory) -> None:
    inspector = inspector_factory(instrumentation_enabled=False)
    tracker = RebuildTracker(inspector, "Release", heatmap=True)

    assert tracker.on_build() == 0
    tracker.attach(FakeLayoutHandle(Rect(0, 0, 1, 1)))

    assert tracker.count == 0
    assert tracker.attached is False
    assert tracker.badge() is None
    assert inspector.version == 0


def test_capture_reason_defaults_to_inspector_setting(inspector_factory) -> None:
    inspector = inspector_factory(capture_reasons=True)
    inherits = RebuildTracker(inspector, "Form")
    opts_out = RebuildTracker(inspector, "Static", capture_reason=False)

    def set_state_handler() -> None:
        inherits.on_build()
        opts_out.on_build()

    set_state_handler()

    assert inspector.get_stats("Form").inferred_reason is RebuildReason.SET_STATE
    assert inspector.get_stats("Static").inferred_reason is None


def test_capture_reason_off_when_inspector_does_not_capture(inspector: RebuildInspector) -> None:
    tracker = RebuildTracker(inspector, "Form")

    def set_state_handler() -> None:
        tracker.on_build()

    set_state_handler()

    assert inspector.capture_reasons is False
    assert inspector.get_stats("Form").inferred_reason is None
