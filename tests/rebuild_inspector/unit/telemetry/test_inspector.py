from __future__ import annotations

from rebuild_inspector.runtime.scheduler import PostFrameScheduler
from rebuild_inspector.telemetry.geometry import Rect
from rebuild_inspector.telemetry.inspector import RebuildInspector
from rebuild_inspector.telemetry.records import RebuildReason
from tests.rebuild_inspector.conftest import FakeLayoutHandle


def test_record_event_then_query_through_facade(inspector: RebuildInspector) -> None:
    for _ in range(3):
        inspector.record_event("List")
    inspector.record_event("Row", "setState")

    assert inspector.get_stats("List").count == 3
    assert inspector.get_stats("Row").inferred_reason is RebuildReason.SET_STATE
    assert [s.name for s in inspector.get_top(1)] == ["List"]
    assert inspector.version == 4


def test_clear_drops_geometry_and_stats_with_one_notification(inspector: RebuildInspector) -> None:
    inspector.record_event("Header")
    inspector.register_geometry("Header", FakeLayoutHandle(Rect(0, 0, 10, 10)))
    before = inspector.version

    inspector.clear()

    assert inspector.version == before + 1
    assert inspector.get_stats("Header") is None
    assert inspector.snapshot_heatmap() == []
    assert inspector.heatmap.registered_count == 0


def test_snapshot_heatmap_uses_live_counts(inspector: RebuildInspector) -> None:
    inspector.register_geometry("Card", FakeLayoutHandle(Rect(5, 5, 50, 20)))
    assert inspector.snapshot_heatmap()[0].count == 0

    inspector.record_event("Card")
    inspector.record_event("Card")

    (entry,) = inspector.snapshot_heatmap()
    assert entry.name == "Card"
    assert entry.count == 2


def test_snapshot_heatmap_omits_detached_handles(inspector: RebuildInspector) -> None:
    handle = FakeLayoutHandle(Rect(0, 0, 10, 10))
    inspector.register_geometry("Popup", handle)
    handle.attached = False
    assert inspector.snapshot_heatmap() == []


def test_build_suggestions_composes_sorted_stats(inspector_factory) -> None:
    inspector = inspector_factory(suggestion_medium_cutoff=10, suggestion_high_cutoff=20)
    for name, count in (("C", 3), ("B", 12), ("A", 25)):
        for _ in range(count):
            inspector.record_event(name)

    suggestions = inspector.build_suggestions()

    assert [s.target_name for s in suggestions] == ["A", "B"]
    assert "jank" in suggestions[0].message


def test_listener_mutation_is_deferred_not_recursive(
    inspector: RebuildInspector, scheduler: PostFrameScheduler
) -> None:
    notifier = inspector.subscribe_to_changes()
    observed: list[int] = []

    def _on_change() -> None:
        observed.append(notifier.version)
        if len(observed) == 1:
            inspector.record_event("Echo")

    notifier.subscribe(_on_change)
    inspector.record_event("Source")
    inspector.record_event("Source")

    assert observed == []
    scheduler.run_frame_callbacks()
    assert observed == [2]
    assert inspector.get_stats("Echo").count == 1

    scheduler.run_frame_callbacks()
    assert observed == [2, 3]
    assert scheduler.run_frame_callbacks() == 0


def test_disabled_inspector_is_inert(inspector_factory, scheduler: PostFrameScheduler) -> None:
    inspector = inspector_factory(instrumentation_enabled=False)
    inspector.record_event("A", "setState")
    inspector.register_geometry("A", FakeLayoutHandle(Rect(0, 0, 5, 5)))
    inspector.reset("A")
    inspector.reset_all()
    inspector.clear()
    inspector.unregister_geometry("A")

    assert inspector.instrumentation_enabled is False
    assert inspector.get_stats("A") is None
    assert inspector.get_all_stats() == []
    assert inspector.get_top(3) == []
    assert inspector.snapshot_heatmap() == []
    assert inspector.build_suggestions() == []
    assert inspector.version == 0
    assert scheduler.queued_task_count == 0
